"""Follow domain service."""

from datetime import datetime
from typing import List
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from social.domain.error import BusinessRuleViolationError
from social.domain.model.follow import Follow
from social.domain.model.user import User
from social.domain.repository import FollowRepository
from social.domain.value import FollowId, UserId

from .base import Service
from .user_service import UserService


class FollowService(Service):
    """Domain service for the follow graph."""

    def __init__(
        self, follow_repository: FollowRepository, user_service: UserService
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_service: User domain service
        """
        self.follow_repository = follow_repository
        self.user_service = user_service

    async def follow(self, follower_id: UserId, followed_id: UserId) -> Follow:
        """Make ``follower_id`` follow ``followed_id``.

        Raises:
            NotFoundError: If the followed user doesn't exist
            BusinessRuleViolationError: If following oneself or already following
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(follower_id),
            followed_id=str(followed_id),
        ):
            if follower_id == followed_id:
                raise BusinessRuleViolationError("You cannot follow yourself")

            await self.user_service.get_by_id(followed_id)

            if await self.follow_repository.find(follower_id, followed_id):
                logfire.warn(
                    "Duplicate follow attempt",
                    follower_id=str(follower_id),
                    followed_id=str(followed_id),
                )
                raise BusinessRuleViolationError("Already following this user")

            follow = Follow(
                id=FollowId(uuid4()),
                follower_id=follower_id,
                followed_id=followed_id,
                created_at=datetime.now(),
            )

            try:
                saved = await self.follow_repository.save(follow)
            except IntegrityError:
                raise BusinessRuleViolationError("Already following this user")

            logfire.info(
                "User followed",
                follower_id=str(follower_id),
                followed_id=str(followed_id),
            )
            return saved

    async def unfollow(self, follower_id: UserId, followed_id: UserId) -> None:
        """Remove the edge ``follower_id -> followed_id``.

        Raises:
            NotFoundError: If the followed user doesn't exist
            BusinessRuleViolationError: If not following the user
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=str(follower_id),
            followed_id=str(followed_id),
        ):
            await self.user_service.get_by_id(followed_id)

            deleted = await self.follow_repository.delete(follower_id, followed_id)
            if not deleted:
                raise BusinessRuleViolationError("You are not following this user")

            logfire.info(
                "User unfollowed",
                follower_id=str(follower_id),
                followed_id=str(followed_id),
            )

    async def get_followers(self, user_id: UserId) -> List[User]:
        """Users following ``user_id``, most recent follow first.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("follow_service.get_followers", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            follows = await self.follow_repository.find_followers(user_id)
            return await self.user_service.get_many([f.follower_id for f in follows])

    async def get_following(self, user_id: UserId) -> List[User]:
        """Users ``user_id`` follows, most recent follow first.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("follow_service.get_following", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            follows = await self.follow_repository.find_following(user_id)
            return await self.user_service.get_many([f.followed_id for f in follows])
