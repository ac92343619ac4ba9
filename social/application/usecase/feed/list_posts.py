"""List posts use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import FeedService
from social.domain.value import DEFAULT_PAGE_LIMIT, Pagination, Search, UserId

from .views import PostListResponse, PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    Without ``author_id`` every author's posts are listed.
    """

    viewer_id: str
    author_id: str | None = None
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0
    query: str = ""


class ListPostsUseCase:
    """Use case for listing posts, optionally by a single author."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize list posts use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: ListPostsRequest) -> Optional[PostListResponse]:
        """Execute list posts flow.

        Returns:
            The window of posts, or None when no post matches
        """
        viewer_id = UserId(UUID(request.viewer_id))
        pagination = Pagination(limit=request.limit, offset=request.offset)
        search = Search(query=request.query)

        if request.author_id:
            posts = await self.feed_service.get_posts_by_author(
                author_id=UserId(UUID(request.author_id)),
                viewer_id=viewer_id,
                pagination=pagination,
                search=search,
            )
        else:
            posts = await self.feed_service.list_posts(viewer_id, pagination, search)

        if not posts:
            return None

        return PostListResponse(
            posts=[PostResponse.from_view(post) for post in posts],
            limit=pagination.limit,
            offset=pagination.offset,
        )
