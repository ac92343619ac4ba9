"""Feed repository interface.

The feed repository answers the enriched, viewer-relative reads: each
method issues one statement joining a windowed base set to its aggregate
counts, viewer flags and children, and folds the rows into read models.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from social.domain.model.feed import CommentView, PostView, ReplyView
from social.domain.value import CommentId, Pagination, PostId, Search, UserId


class FeedRepository(ABC):
    """Repository for enriched post, comment and reply projections."""

    @abstractmethod
    async def find_feed(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Find posts written by authors the viewer follows.

        Args:
            viewer_id: User the counts and flags are computed for
            pagination: Window over posts ordered newest first
            search: Substring filter on post content

        Returns:
            Posts in the window with their comments; empty when nothing matches
        """
        pass

    @abstractmethod
    async def find_posts(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Find posts from every author, windowed and searched."""
        pass

    @abstractmethod
    async def find_posts_by_author(
        self,
        author_id: UserId,
        viewer_id: UserId,
        pagination: Pagination,
        search: Search,
    ) -> List[PostView]:
        """Find posts written by one author, windowed and searched."""
        pass

    @abstractmethod
    async def find_post_detail(
        self, post_id: PostId, viewer_id: UserId
    ) -> Optional[PostView]:
        """Find one post with all of its comments.

        Args:
            post_id: Post to load
            viewer_id: User the counts and flags are computed for

        Returns:
            The post if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_comments_by_post(
        self, post_id: PostId, viewer_id: UserId
    ) -> List[CommentView]:
        """Find the comments of a post, each with its replies."""
        pass

    @abstractmethod
    async def find_replies_by_comment(self, comment_id: CommentId) -> List[ReplyView]:
        """Find the replies of a comment in creation order."""
        pass
