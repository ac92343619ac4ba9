"""PostgreSQL implementation of Feed repository."""

from typing import Any, Dict, List, Optional

import logfire
from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model.feed import CommentView, PostView, ReplyView
from social.domain.repository import FeedRepository
from social.domain.value import CommentId, Pagination, PostId, Search, UserId
from social.persistence import aggregation
from social.persistence.materializer import (
    materialize_comments,
    materialize_posts,
    materialize_replies,
)


class PostgresFeedRepository(FeedRepository):
    """PostgreSQL implementation of FeedRepository.

    Each read builds one statement, drains its rows and folds them. Store
    errors are not caught here and reach the caller unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_rows(self, stmt: Select) -> List[Dict[str, Any]]:
        """Execute a statement and consume its whole result.

        The result is closed before returning, also when fetching fails.
        """
        result = await self.session.execute(stmt)
        try:
            return [row._asdict() for row in result.fetchall()]
        finally:
            result.close()

    async def find_feed(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Find posts written by authors the viewer follows."""
        with logfire.span(
            "feed_repository.find_feed",
            viewer_id=str(viewer_id),
            limit=pagination.limit,
            offset=pagination.offset,
            query=search.query,
        ):
            window = aggregation.feed_window(viewer_id, pagination, search)
            rows = await self._fetch_rows(aggregation.post_projection(window, viewer_id))
            posts = materialize_posts(rows)
            logfire.info("Feed assembled", rows=len(rows), posts=len(posts))
            return posts

    async def find_posts(
        self, viewer_id: UserId, pagination: Pagination, search: Search
    ) -> List[PostView]:
        """Find posts from every author, windowed and searched."""
        with logfire.span(
            "feed_repository.find_posts",
            viewer_id=str(viewer_id),
            limit=pagination.limit,
            offset=pagination.offset,
            query=search.query,
        ):
            window = aggregation.all_posts_window(pagination, search)
            rows = await self._fetch_rows(aggregation.post_projection(window, viewer_id))
            posts = materialize_posts(rows)
            logfire.info("Found posts", rows=len(rows), posts=len(posts))
            return posts

    async def find_posts_by_author(
        self,
        author_id: UserId,
        viewer_id: UserId,
        pagination: Pagination,
        search: Search,
    ) -> List[PostView]:
        """Find posts written by one author, windowed and searched."""
        with logfire.span(
            "feed_repository.find_posts_by_author",
            author_id=str(author_id),
            viewer_id=str(viewer_id),
            limit=pagination.limit,
            offset=pagination.offset,
            query=search.query,
        ):
            window = aggregation.author_window(author_id, pagination, search)
            rows = await self._fetch_rows(aggregation.post_projection(window, viewer_id))
            posts = materialize_posts(rows)
            logfire.info("Found author posts", rows=len(rows), posts=len(posts))
            return posts

    async def find_post_detail(
        self, post_id: PostId, viewer_id: UserId
    ) -> Optional[PostView]:
        """Find one post with all of its comments."""
        with logfire.span(
            "feed_repository.find_post_detail",
            post_id=str(post_id),
            viewer_id=str(viewer_id),
        ):
            window = aggregation.single_post_window(post_id)
            rows = await self._fetch_rows(aggregation.post_projection(window, viewer_id))
            posts = materialize_posts(rows)
            if not posts:
                return None
            return posts[0]

    async def find_comments_by_post(
        self, post_id: PostId, viewer_id: UserId
    ) -> List[CommentView]:
        """Find the comments of a post, each with its replies."""
        with logfire.span(
            "feed_repository.find_comments_by_post",
            post_id=str(post_id),
            viewer_id=str(viewer_id),
        ):
            stmt = aggregation.comments_with_replies_projection(post_id, viewer_id)
            rows = await self._fetch_rows(stmt)
            comments = materialize_comments(rows)
            logfire.info("Found comments", rows=len(rows), comments=len(comments))
            return comments

    async def find_replies_by_comment(self, comment_id: CommentId) -> List[ReplyView]:
        """Find the replies of a comment in creation order."""
        with logfire.span(
            "feed_repository.find_replies_by_comment", comment_id=str(comment_id)
        ):
            rows = await self._fetch_rows(aggregation.replies_projection(comment_id))
            return materialize_replies(rows)
