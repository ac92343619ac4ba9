"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import CommentService
from social.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # From authenticated user


class DeleteCommentUseCase:
    """Use case for deleting a comment with its replies and likes."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
