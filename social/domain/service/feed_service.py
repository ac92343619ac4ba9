"""Feed domain service.

Assembles the enriched reads. An empty window or a missing target is a
not-found outcome (empty list or None), never an exception; store errors
propagate unchanged.
"""

from typing import List, Optional

import logfire

from social.domain.model.feed import CommentView, PostView, ReplyView
from social.domain.repository import FeedRepository
from social.domain.value import CommentId, Pagination, PostId, Search, UserId

from .base import Service


class FeedService(Service):
    """Domain service for viewer-relative post, comment and reply reads."""

    def __init__(self, feed_repository: FeedRepository) -> None:
        """Initialize feed service.

        Args:
            feed_repository: Feed repository
        """
        self.feed_repository = feed_repository

    async def get_feed(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Posts by authors the viewer follows, newest first.

        Args:
            viewer_id: Authenticated user
            pagination: Window over the feed
            search: Substring filter on post content

        Returns:
            Posts with their comments; empty when the window is empty
        """
        with logfire.span("feed_service.get_feed", viewer_id=str(viewer_id)):
            posts = await self.feed_repository.find_feed(viewer_id, pagination, search)
            if not posts:
                logfire.info("Feed window empty", viewer_id=str(viewer_id))
            return posts

    async def list_posts(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Posts from every author, newest first."""
        with logfire.span("feed_service.list_posts", viewer_id=str(viewer_id)):
            return await self.feed_repository.find_posts(viewer_id, pagination, search)

    async def get_posts_by_author(
        self,
        author_id: UserId,
        viewer_id: UserId,
        pagination: Pagination,
        search: Search,
    ) -> List[PostView]:
        """Posts of one author, newest first."""
        with logfire.span(
            "feed_service.get_posts_by_author",
            author_id=str(author_id),
            viewer_id=str(viewer_id),
        ):
            return await self.feed_repository.find_posts_by_author(
                author_id, viewer_id, pagination, search
            )

    async def get_post_detail(
        self, post_id: PostId, viewer_id: UserId
    ) -> Optional[PostView]:
        """A single post with all of its comments.

        Any post is viewable, followed author or not.

        Returns:
            The post, or None if it doesn't exist
        """
        with logfire.span(
            "feed_service.get_post_detail",
            post_id=str(post_id),
            viewer_id=str(viewer_id),
        ):
            post = await self.feed_repository.find_post_detail(post_id, viewer_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def get_comments_by_post(
        self, post_id: PostId, viewer_id: UserId
    ) -> List[CommentView]:
        """Comments of a post, oldest first, each with its replies."""
        with logfire.span(
            "feed_service.get_comments_by_post",
            post_id=str(post_id),
            viewer_id=str(viewer_id),
        ):
            return await self.feed_repository.find_comments_by_post(post_id, viewer_id)

    async def get_replies_by_comment(self, comment_id: CommentId) -> List[ReplyView]:
        """Replies of a comment, oldest first."""
        with logfire.span(
            "feed_service.get_replies_by_comment", comment_id=str(comment_id)
        ):
            return await self.feed_repository.find_replies_by_comment(comment_id)
