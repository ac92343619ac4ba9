"""User domain service."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire

from social.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from social.domain.model.user import User
from social.domain.repository import UserRepository
from social.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user profile operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If user doesn't exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID without raising when missing."""
        return await self.user_repository.find_by_id(user_id)

    async def get_many(self, user_ids: List[UserId]) -> List[User]:
        """Get users by ID, keeping the order of ``user_ids``.

        IDs with no matching user are skipped.
        """
        users = await self.user_repository.find_by_ids(user_ids)
        by_id = {user.id: user for user in users}
        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    async def create_user(
        self,
        name: str,
        last_name: str,
        username: Username,
        email: str,
        avatar: Optional[str] = None,
    ) -> User:
        """Create a user profile.

        Args:
            name: First name
            last_name: Last name
            username: Unique username
            email: Unique email address
            avatar: Optional avatar URL

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If username or email is taken
        """
        with logfire.span("user_service.create_user", username=str(username)):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already exists", username=str(username))
                raise BusinessRuleViolationError("Username already exists")

            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already exists", username=str(username))
                raise BusinessRuleViolationError("Email already exists")

            user = User(
                id=UserId(uuid4()),
                name=name,
                last_name=last_name,
                username=username,
                email=email,
                avatar=avatar,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), username=str(username))
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Update a user's display name.

        Args:
            user_id: User ID
            name: New first name (None to keep current)
            last_name: New last name (None to keep current)

        Returns:
            Updated user

        Raises:
            NotFoundError: If user doesn't exist
            ValidationError: If nothing would change
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            if name is None and last_name is None:
                raise ValidationError("Nothing to update")

            user = await self.get_by_id(user_id)

            updates: dict = {"updated_at": datetime.now()}
            if name is not None:
                updates["name"] = name
            if last_name is not None:
                updates["last_name"] = last_name

            updated = user.model_copy(update=updates)
            saved = await self.user_repository.save(updated)
            logfire.info("User profile updated", user_id=str(user_id))
            return saved
