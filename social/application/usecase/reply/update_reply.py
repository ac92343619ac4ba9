"""Update reply use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import ReplyService
from social.domain.value import ReplyId, UserId

from .create_reply import ReplyResponse


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    reply_id: str
    user_id: str  # From authenticated user
    message: str


class UpdateReplyUseCase:
    """Use case for editing a reply. Only its author may edit it."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: UpdateReplyRequest) -> ReplyResponse:
        reply = await self.reply_service.update_reply(
            reply_id=ReplyId(UUID(request.reply_id)),
            user_id=UserId(UUID(request.user_id)),
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
