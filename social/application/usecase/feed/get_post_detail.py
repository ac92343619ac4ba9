"""Get post detail use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import FeedService
from social.domain.value import PostId, UserId

from .views import PostResponse


class GetPostDetailRequest(BaseModel):
    """Get post detail request."""

    post_id: str
    viewer_id: str


class GetPostDetailUseCase:
    """Use case for a single post with its comments."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get post detail use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetPostDetailRequest) -> Optional[PostResponse]:
        """Execute get post detail flow.

        Returns:
            Post details if found, None otherwise
        """
        post = await self.feed_service.get_post_detail(
            post_id=PostId(UUID(request.post_id)),
            viewer_id=UserId(UUID(request.viewer_id)),
        )
        if not post:
            return None
        return PostResponse.from_view(post)
