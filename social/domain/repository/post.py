"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model.post import Post
from social.domain.value import PostId


class PostRepository(ABC):
    """Repository for stored posts.

    Enriched, viewer-relative reads go through FeedRepository; this contract
    covers single-row bookkeeping only.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments, replies and likes.

        Args:
            post_id: The post to delete

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass
