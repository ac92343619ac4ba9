"""Create reply use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import ReplyService
from social.domain.value import CommentId, UserId


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    comment_id: str
    author_id: str  # From authenticated user
    message: str


class ReplyResponse(BaseModel):
    """A reply as stored."""

    reply_id: str
    comment_id: str
    author_id: str
    message: str
    created_at: datetime
    updated_at: datetime


class CreateReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(self, reply_service: ReplyService) -> None:
        """Initialize create reply use case.

        Args:
            reply_service: Reply domain service
        """
        self.reply_service = reply_service

    async def execute(self, request: CreateReplyRequest) -> ReplyResponse:
        """Execute create reply flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        reply = await self.reply_service.create_reply(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=UserId(UUID(request.author_id)),
            message=request.message,
        )

        return ReplyResponse(
            reply_id=str(reply.id),
            comment_id=str(reply.comment_id),
            author_id=str(reply.author_id),
            message=reply.message,
            created_at=reply.created_at,
            updated_at=reply.updated_at,
        )
