"""Delete reply use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import ReplyService
from social.domain.value import ReplyId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    reply_id: str
    user_id: str  # From authenticated user


class DeleteReplyUseCase:
    """Use case for deleting a reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: DeleteReplyRequest) -> None:
        await self.reply_service.delete_reply(
            ReplyId(UUID(request.reply_id)), UserId(UUID(request.user_id))
        )
