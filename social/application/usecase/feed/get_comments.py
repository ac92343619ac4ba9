"""Get comments use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from social.domain.error import NotFoundError
from social.domain.service import FeedService, PostService
from social.domain.value import PostId, UserId

from .views import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str
    viewer_id: str


class GetCommentsResponse(BaseModel):
    """Comments of a post, oldest first, each with its replies."""

    post_id: str
    comments: list[CommentResponse]


class GetCommentsUseCase:
    """Use case for the comments of a post."""

    def __init__(self, feed_service: FeedService, post_service: PostService) -> None:
        """Initialize get comments use case.

        Args:
            feed_service: Feed domain service
            post_service: Post domain service
        """
        self.feed_service = feed_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> Optional[GetCommentsResponse]:
        """Execute get comments flow.

        Returns:
            The comments, or None when the post has none

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))

        if not await self.post_service.get_post_by_id(post_id):
            raise NotFoundError("Post", request.post_id)

        comments = await self.feed_service.get_comments_by_post(
            post_id, UserId(UUID(request.viewer_id))
        )
        if not comments:
            return None

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentResponse.from_view(comment) for comment in comments],
        )
