"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model.user import User
from social.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's unique username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
