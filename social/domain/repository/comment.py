"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model.comment import Comment
from social.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for stored comments."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment together with its replies and likes.

        Returns:
            True if a comment was deleted, False if it did not exist
        """
        pass
