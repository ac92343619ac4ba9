"""Like domain service."""

from datetime import datetime
from typing import Union
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from social.domain.error import BusinessRuleViolationError, NotFoundError
from social.domain.model.like import Like
from social.domain.repository import LikeRepository
from social.domain.value import CommentId, LikeId, LikeTarget, PostId, UserId

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class LikeService(Service):
    """Domain service for liking posts and comments."""

    def __init__(
        self,
        like_repository: LikeRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.like_repository = like_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def _ensure_target_exists(
        self, target: LikeTarget, target_id: Union[PostId, CommentId]
    ) -> None:
        if target == LikeTarget.POST:
            found = await self.post_service.get_post_by_id(PostId(target_id))
        else:
            found = await self.comment_service.get_comment_by_id(CommentId(target_id))
        if not found:
            raise NotFoundError(target.value.capitalize(), str(target_id))

    async def like(
        self,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
        user_id: UserId,
    ) -> Like:
        """Like a post or a comment.

        Args:
            target: Type of item
            target_id: Item ID
            user_id: User liking the item

        Returns:
            Created like

        Raises:
            NotFoundError: If the item doesn't exist
            BusinessRuleViolationError: If the user already likes the item
        """
        with logfire.span(
            "like_service.like",
            target=target.value,
            target_id=str(target_id),
            user_id=str(user_id),
        ):
            await self._ensure_target_exists(target, target_id)

            already_liked = f"{target.value.capitalize()} already liked"
            if await self.like_repository.find_by_user_and_target(
                user_id, target, target_id
            ):
                logfire.warn(
                    "Duplicate like attempt",
                    target=target.value,
                    target_id=str(target_id),
                    user_id=str(user_id),
                )
                raise BusinessRuleViolationError(already_liked)

            like = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                target=target,
                target_id=target_id,
                created_at=datetime.now(),
            )

            try:
                saved = await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Concurrent duplicate like",
                    target=target.value,
                    target_id=str(target_id),
                    user_id=str(user_id),
                )
                raise BusinessRuleViolationError(already_liked)

            logfire.info("Liked", target=target.value, target_id=str(target_id))
            return saved

    async def unlike(
        self,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
        user_id: UserId,
    ) -> None:
        """Remove a like from a post or a comment.

        Raises:
            NotFoundError: If the item doesn't exist
            BusinessRuleViolationError: If the user hasn't liked the item
        """
        with logfire.span(
            "like_service.unlike",
            target=target.value,
            target_id=str(target_id),
            user_id=str(user_id),
        ):
            await self._ensure_target_exists(target, target_id)

            deleted = await self.like_repository.delete_by_user_and_target(
                user_id, target, target_id
            )
            if not deleted:
                logfire.warn(
                    "Unlike without like",
                    target=target.value,
                    target_id=str(target_id),
                    user_id=str(user_id),
                )
                raise BusinessRuleViolationError(
                    f"{target.value.capitalize()} not liked yet"
                )

            logfire.info("Unliked", target=target.value, target_id=str(target_id))

    async def count_likes(
        self, target: LikeTarget, target_id: Union[PostId, CommentId]
    ) -> int:
        """Count likes on an item."""
        return await self.like_repository.count_by_target(target, target_id)
