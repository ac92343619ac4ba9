"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from social.domain.error import NotAuthorizedError, NotFoundError
from social.domain.model.comment import Comment
from social.domain.repository import CommentRepository
from social.domain.value import CommentId, PostId, UserId

from .base import Service
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, post_service: PostService
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
        """
        self.comment_repository = comment_repository
        self.post_service = post_service

    async def get_comment_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post being commented on
            author_id: Author's user ID
            content: Comment content

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            if not await self.post_service.get_post_by_id(post_id):
                raise NotFoundError("Post", str(post_id))

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def _get_owned_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            logfire.warn(
                "Unauthorized comment change attempt",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))
        return comment

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Update a comment's content. Only the author can edit.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self._get_owned_comment(comment_id, user_id)
            updated = comment.model_copy(
                update={"content": content, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment. Only the author can delete.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self._get_owned_comment(comment_id, user_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
