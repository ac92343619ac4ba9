"""Like and unlike use cases."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import LikeService
from social.domain.value import LikeTarget, UserId


class LikeRequest(BaseModel):
    """Like or unlike request."""

    target: LikeTarget
    target_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeResponse(BaseModel):
    """Like state of an item after the change."""

    target: LikeTarget
    target_id: str
    is_liked: bool
    like_count: int


class LikeUseCase:
    """Use case for liking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the item doesn't exist
            BusinessRuleViolationError: If the item is already liked
        """
        target_id = UUID(request.target_id)
        await self.like_service.like(
            request.target, target_id, UserId(UUID(request.user_id))
        )

        return LikeResponse(
            target=request.target,
            target_id=request.target_id,
            is_liked=True,
            like_count=await self.like_service.count_likes(request.target, target_id),
        )


class UnlikeUseCase:
    """Use case for removing a like from a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the item doesn't exist
            BusinessRuleViolationError: If the item is not liked
        """
        target_id = UUID(request.target_id)
        await self.like_service.unlike(
            request.target, target_id, UserId(UUID(request.user_id))
        )

        return LikeResponse(
            target=request.target,
            target_id=request.target_id,
            is_liked=False,
            like_count=await self.like_service.count_likes(request.target, target_id),
        )
