"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from social.domain.service import CommentService
from social.domain.value import CommentId, UserId

from .create_comment import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # From authenticated user
    content: str


class UpdateCommentUseCase:
    """Use case for editing a comment. Only its author may edit it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        return CommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
