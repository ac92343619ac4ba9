"""Get replies use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from social.domain.error import NotFoundError
from social.domain.service import CommentService, FeedService
from social.domain.value import CommentId

from .views import ReplyResponse


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str


class GetRepliesResponse(BaseModel):
    """Replies of a comment, oldest first."""

    comment_id: str
    replies: list[ReplyResponse]


class GetRepliesUseCase:
    """Use case for the replies of a comment."""

    def __init__(
        self, feed_service: FeedService, comment_service: CommentService
    ) -> None:
        self.feed_service = feed_service
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> Optional[GetRepliesResponse]:
        """Execute get replies flow.

        Returns:
            The replies, or None when the comment has none

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(UUID(request.comment_id))

        if not await self.comment_service.get_comment_by_id(comment_id):
            raise NotFoundError("Comment", request.comment_id)

        replies = await self.feed_service.get_replies_by_comment(comment_id)
        if not replies:
            return None

        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[ReplyResponse.from_view(reply) for reply in replies],
        )
