"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from social.domain.model.like import Like
from social.domain.value import CommentId, LikeTarget, PostId, UserId


class LikeRepository(ABC):
    """Repository for likes on posts and comments."""

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
    ) -> Optional[Like]:
        """Find a user's like on a specific item.

        Args:
            user_id: The user's ID
            target: Type of item (post or comment)
            target_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Raises:
            IntegrityError: If the user already likes the item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
    ) -> bool:
        """Delete a user's like on an item.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_target(
        self, target: LikeTarget, target_id: Union[PostId, CommentId]
    ) -> int:
        """Count likes on an item."""
        pass
