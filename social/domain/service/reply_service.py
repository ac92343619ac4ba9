"""Reply domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from social.domain.error import NotAuthorizedError, NotFoundError
from social.domain.model.reply import Reply
from social.domain.repository import ReplyRepository
from social.domain.value import CommentId, ReplyId, UserId

from .base import Service
from .comment_service import CommentService


class ReplyService(Service):
    """Domain service for reply operations."""

    def __init__(
        self, reply_repository: ReplyRepository, comment_service: CommentService
    ) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
            comment_service: Comment domain service
        """
        self.reply_repository = reply_repository
        self.comment_service = comment_service

    async def create_reply(
        self, comment_id: CommentId, author_id: UserId, message: str
    ) -> Reply:
        """Reply to a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "reply_service.create_reply",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            if not await self.comment_service.get_comment_by_id(comment_id):
                raise NotFoundError("Comment", str(comment_id))

            reply = Reply(
                id=ReplyId(uuid4()),
                comment_id=comment_id,
                author_id=author_id,
                message=message,
            )
            saved = await self.reply_repository.save(reply)
            logfire.info(
                "Reply created", reply_id=str(saved.id), comment_id=str(comment_id)
            )
            return saved

    async def _get_owned_reply(self, reply_id: ReplyId, user_id: UserId) -> Reply:
        reply = await self.reply_repository.find_by_id(reply_id)
        if not reply:
            logfire.warn("Reply not found", reply_id=str(reply_id))
            raise NotFoundError("Reply", str(reply_id))
        if reply.author_id != user_id:
            logfire.warn(
                "Unauthorized reply change attempt",
                reply_id=str(reply_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("reply", str(reply_id), str(user_id))
        return reply

    async def update_reply(
        self, reply_id: ReplyId, user_id: UserId, message: str
    ) -> Reply:
        """Update a reply's message. Only the author can edit."""
        with logfire.span(
            "reply_service.update_reply", reply_id=str(reply_id), user_id=str(user_id)
        ):
            reply = await self._get_owned_reply(reply_id, user_id)
            updated = reply.model_copy(
                update={"message": message, "updated_at": datetime.now()}
            )
            saved = await self.reply_repository.save(updated)
            logfire.info("Reply updated", reply_id=str(reply_id))
            return saved

    async def delete_reply(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Delete a reply. Only the author can delete."""
        with logfire.span(
            "reply_service.delete_reply", reply_id=str(reply_id), user_id=str(user_id)
        ):
            await self._get_owned_reply(reply_id, user_id)
            await self.reply_repository.delete(reply_id)
            logfire.info("Reply deleted", reply_id=str(reply_id))
