"""Update user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from social.domain.service import UserService
from social.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    username: str
    name: str
    last_name: str
    updated_at: datetime


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Only the display name can change here. Username, email and credentials
    are managed elsewhere.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If user not found
            ValidationError: If no field is given
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            name=request.name,
            last_name=request.last_name,
        )

        return UpdateUserProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            last_name=user.last_name,
            updated_at=user.updated_at,
        )
