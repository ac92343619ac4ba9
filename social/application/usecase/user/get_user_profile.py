"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import FollowService, UserService
from social.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    username: str
    name: str
    last_name: str
    avatar: str | None
    follower_count: int
    following_count: int
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(self, user_service: UserService, follow_service: FollowService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            follow_service: Follow domain service
        """
        self.user_service = user_service
        self.follow_service = follow_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        followers = await self.follow_service.get_followers(user.id)
        following = await self.follow_service.get_following(user.id)

        return GetUserProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            last_name=user.last_name,
            avatar=user.avatar,
            follower_count=len(followers),
            following_count=len(following),
            created_at=user.created_at,
        )
