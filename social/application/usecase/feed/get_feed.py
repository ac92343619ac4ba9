"""Get feed use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import FeedService
from social.domain.value import DEFAULT_PAGE_LIMIT, Pagination, Search, UserId

from .views import PostListResponse, PostResponse


class GetFeedRequest(BaseModel):
    """Get feed request."""

    viewer_id: str  # Authenticated user ID
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0
    query: str = ""


class GetFeedUseCase:
    """Use case for the personalized feed: posts by followed authors."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get feed use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetFeedRequest) -> Optional[PostListResponse]:
        """Execute get feed flow.

        Args:
            request: Viewer, window and search term

        Returns:
            The window of posts, or None when no post matches
        """
        pagination = Pagination(limit=request.limit, offset=request.offset)
        posts = await self.feed_service.get_feed(
            viewer_id=UserId(UUID(request.viewer_id)),
            pagination=pagination,
            search=Search(query=request.query),
        )

        if not posts:
            return None

        return PostListResponse(
            posts=[PostResponse.from_view(post) for post in posts],
            limit=pagination.limit,
            offset=pagination.offset,
        )
