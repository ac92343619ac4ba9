"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import JWTService, UserService
from social.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    name: str
    last_name: str
    email: str
    avatar: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a bearer token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the ``sub`` claim

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        # Load user from database (raises NotFoundError if not found)
        user = await self.user_service.get_by_id(UserId(UUID(payload.sub)))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            last_name=user.last_name,
            email=user.email,
            avatar=user.avatar,
            created_at=user.created_at,
        )
