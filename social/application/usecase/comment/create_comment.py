"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from social.domain.service import CommentService
from social.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    author_id: str  # From authenticated user
    content: str


class CommentResponse(BaseModel):
    """A comment as stored, without counts."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
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
