"""Follow and unfollow use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import FollowService
from social.domain.value import UserId


class FollowRequest(BaseModel):
    """Follow or unfollow request."""

    follower_id: str  # From authenticated user
    followed_id: str


class FollowResponse(BaseModel):
    """Follow response."""

    follow_id: str
    follower_id: str
    followed_id: str
    created_at: datetime


class FollowUserUseCase:
    """Use case for following a user."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Execute follow flow.

        Raises:
            NotFoundError: If the followed user doesn't exist
            BusinessRuleViolationError: If following oneself or already following
        """
        follow = await self.follow_service.follow(
            UserId(UUID(request.follower_id)), UserId(UUID(request.followed_id))
        )

        return FollowResponse(
            follow_id=str(follow.id),
            follower_id=str(follow.follower_id),
            followed_id=str(follow.followed_id),
            created_at=follow.created_at,
        )


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowRequest) -> None:
        await self.follow_service.unfollow(
            UserId(UUID(request.follower_id)), UserId(UUID(request.followed_id))
        )
