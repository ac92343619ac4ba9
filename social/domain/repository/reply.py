"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model.reply import Reply
from social.domain.value import ReplyId


class ReplyRepository(ABC):
    """Repository for stored replies."""

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        pass

    @abstractmethod
    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a reply.

        Returns:
            True if a reply was deleted, False if it did not exist
        """
        pass
