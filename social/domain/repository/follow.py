"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model.follow import Follow
from social.domain.value import UserId


class FollowRepository(ABC):
    """Repository for the follow graph."""

    @abstractmethod
    async def find(self, follower_id: UserId, followed_id: UserId) -> Optional[Follow]:
        """Find the edge ``follower_id -> followed_id``.

        Returns:
            The follow if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_followers(self, user_id: UserId) -> List[Follow]:
        """Find follows pointing at a user, most recent first."""
        pass

    @abstractmethod
    async def find_following(self, user_id: UserId) -> List[Follow]:
        """Find follows made by a user, most recent first."""
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Save a follow (create).

        Raises:
            IntegrityError: If the edge already exists
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: UserId, followed_id: UserId) -> bool:
        """Delete the edge ``follower_id -> followed_id``.

        Returns:
            True if a follow was deleted, False if none existed
        """
        pass
