"""Aggregation queries for the enriched feed reads.

Every read is one statement shaped the same way:

1. A *window* CTE selects the base rows (posts or comments) that survive
   the search filter and pagination, ordered newest first with the id as
   tie-breaker. Nothing else is computed for rows outside the window.
2. Count CTEs group likes, comments and replies by parent id, restricted
   to parents inside the window, and are LEFT JOINed so a parent without
   children keeps its row; the counts are read through ``COALESCE(.., 0)``.
3. Two viewer CTEs (ids the viewer liked, users the viewer follows) are
   LEFT JOINed and tested with ``IS NOT NULL`` to produce the flags.
4. Child rows are LEFT JOINed last, so each output row carries one parent
   projection and at most one child projection.

The labels below name the columns of the flat row stream and are shared
with :mod:`social.persistence.materializer`.
"""

from typing import Optional

from sqlalchemy import CTE, ColumnElement, Select, func, select

from social.domain.value import CommentId, Pagination, PostId, Search, UserId
from social.persistence.tables import (
    comment_likes_table,
    comments_table,
    follows_table,
    post_likes_table,
    posts_table,
    replies_table,
    users_table,
)

# Post projection
POST_ID = "post_id"
POST_CONTENT = "post_content"
POST_CREATED_AT = "post_created_at"
POST_UPDATED_AT = "post_updated_at"
POST_AUTHOR_ID = "post_author_id"
POST_AUTHOR_NAME = "post_author_name"
POST_AUTHOR_LAST_NAME = "post_author_last_name"
POST_AUTHOR_USERNAME = "post_author_username"
POST_LIKE_COUNT = "post_like_count"
POST_COMMENT_COUNT = "post_comment_count"
POST_IS_LIKED = "post_is_liked"
POST_AUTHOR_IS_FOLLOWED = "post_author_is_followed"

# Comment projection
COMMENT_ID = "comment_id"
COMMENT_POST_ID = "comment_post_id"
COMMENT_CONTENT = "comment_content"
COMMENT_CREATED_AT = "comment_created_at"
COMMENT_UPDATED_AT = "comment_updated_at"
COMMENT_AUTHOR_ID = "comment_author_id"
COMMENT_AUTHOR_NAME = "comment_author_name"
COMMENT_AUTHOR_LAST_NAME = "comment_author_last_name"
COMMENT_AUTHOR_USERNAME = "comment_author_username"
COMMENT_LIKE_COUNT = "comment_like_count"
COMMENT_REPLY_COUNT = "comment_reply_count"
COMMENT_IS_LIKED = "comment_is_liked"
COMMENT_AUTHOR_IS_FOLLOWED = "comment_author_is_followed"

# Reply projection
REPLY_ID = "reply_id"
REPLY_COMMENT_ID = "reply_comment_id"
REPLY_MESSAGE = "reply_message"
REPLY_CREATED_AT = "reply_created_at"
REPLY_UPDATED_AT = "reply_updated_at"
REPLY_AUTHOR_ID = "reply_author_id"
REPLY_AUTHOR_NAME = "reply_author_name"
REPLY_AUTHOR_LAST_NAME = "reply_author_last_name"
REPLY_AUTHOR_USERNAME = "reply_author_username"


# ============================================================================
# WINDOWS
# ============================================================================


def followed_authors(viewer_id: UserId) -> Select:
    """Ids of the users ``viewer_id`` follows."""
    return select(follows_table.c.followed_id).where(
        follows_table.c.follower_id == viewer_id
    )


def _post_window(
    search: Search,
    pagination: Optional[Pagination],
    *criteria: ColumnElement[bool],
) -> CTE:
    stmt = select(
        posts_table.c.id,
        posts_table.c.user_id,
        posts_table.c.content,
        posts_table.c.created_at,
        posts_table.c.updated_at,
    ).where(*criteria)

    if not search.is_empty:
        stmt = stmt.where(posts_table.c.content.icontains(search.query, autoescape=True))

    stmt = stmt.order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())

    if pagination is not None:
        stmt = stmt.limit(pagination.limit).offset(pagination.offset)

    return stmt.cte("post_window")


def feed_window(viewer_id: UserId, pagination: Pagination, search: Search) -> CTE:
    """Window over posts whose author the viewer follows."""
    return _post_window(
        search,
        pagination,
        posts_table.c.user_id.in_(followed_authors(viewer_id)),
    )


def all_posts_window(pagination: Pagination, search: Search) -> CTE:
    """Window over posts from every author."""
    return _post_window(search, pagination)


def author_window(author_id: UserId, pagination: Pagination, search: Search) -> CTE:
    """Window over the posts of a single author."""
    return _post_window(search, pagination, posts_table.c.user_id == author_id)


def single_post_window(post_id: PostId) -> CTE:
    """Window holding at most the one requested post."""
    return _post_window(Search(), None, posts_table.c.id == post_id)


def _comment_window(post_id: PostId) -> CTE:
    return (
        select(
            comments_table.c.id,
            comments_table.c.post_id,
            comments_table.c.user_id,
            comments_table.c.content,
            comments_table.c.created_at,
            comments_table.c.updated_at,
        )
        .where(comments_table.c.post_id == post_id)
        .cte("comment_window")
    )


# ============================================================================
# AGGREGATES AND VIEWER FLAGS
# ============================================================================


def _viewer_follows(viewer_id: UserId) -> CTE:
    return followed_authors(viewer_id).cte("viewer_follows")


def _viewer_post_likes(viewer_id: UserId) -> CTE:
    return (
        select(post_likes_table.c.post_id)
        .where(post_likes_table.c.user_id == viewer_id)
        .cte("viewer_post_likes")
    )


def _viewer_comment_likes(viewer_id: UserId) -> CTE:
    return (
        select(comment_likes_table.c.comment_id)
        .where(comment_likes_table.c.user_id == viewer_id)
        .cte("viewer_comment_likes")
    )


def _post_like_counts(post_ids: Select) -> CTE:
    return (
        select(
            post_likes_table.c.post_id,
            func.count(post_likes_table.c.id).label("like_count"),
        )
        .where(post_likes_table.c.post_id.in_(post_ids))
        .group_by(post_likes_table.c.post_id)
        .cte("post_like_counts")
    )


def _post_comment_counts(post_ids: Select) -> CTE:
    return (
        select(
            comments_table.c.post_id,
            func.count(comments_table.c.id).label("comment_count"),
        )
        .where(comments_table.c.post_id.in_(post_ids))
        .group_by(comments_table.c.post_id)
        .cte("post_comment_counts")
    )


def _comment_like_counts(comment_ids: Select) -> CTE:
    return (
        select(
            comment_likes_table.c.comment_id,
            func.count(comment_likes_table.c.id).label("like_count"),
        )
        .where(comment_likes_table.c.comment_id.in_(comment_ids))
        .group_by(comment_likes_table.c.comment_id)
        .cte("comment_like_counts")
    )


def _comment_reply_counts(comment_ids: Select) -> CTE:
    return (
        select(
            replies_table.c.comment_id,
            func.count(replies_table.c.id).label("reply_count"),
        )
        .where(replies_table.c.comment_id.in_(comment_ids))
        .group_by(replies_table.c.comment_id)
        .cte("comment_reply_counts")
    )


# ============================================================================
# PROJECTIONS
# ============================================================================


def post_projection(window: CTE, viewer_id: UserId) -> Select:
    """Join a post window to its counts, viewer flags and comments.

    Comments carry their own like and reply counts and viewer flags,
    computed in the same statement for the comments of windowed posts.

    Args:
        window: One of the post window CTEs
        viewer_id: User the flags are computed for

    Returns:
        Statement yielding one row per (post, comment) pair, or one row with
        NULL comment columns for a post without comments
    """
    window_ids = select(window.c.id)
    window_comment_ids = select(comments_table.c.id).where(
        comments_table.c.post_id.in_(select(window.c.id))
    )

    post_author = users_table.alias("post_author")
    comment_author = users_table.alias("comment_author")

    post_likes = _post_like_counts(window_ids)
    post_comments = _post_comment_counts(window_ids)
    comment_likes = _comment_like_counts(window_comment_ids)
    comment_replies = _comment_reply_counts(window_comment_ids)
    viewer_post_likes = _viewer_post_likes(viewer_id)
    viewer_comment_likes = _viewer_comment_likes(viewer_id)
    viewer_follows = _viewer_follows(viewer_id)
    comment_author_follows = viewer_follows.alias("comment_author_follows")

    joined = (
        window.join(post_author, post_author.c.id == window.c.user_id)
        .outerjoin(post_likes, post_likes.c.post_id == window.c.id)
        .outerjoin(post_comments, post_comments.c.post_id == window.c.id)
        .outerjoin(viewer_post_likes, viewer_post_likes.c.post_id == window.c.id)
        .outerjoin(viewer_follows, viewer_follows.c.followed_id == window.c.user_id)
        .outerjoin(comments_table, comments_table.c.post_id == window.c.id)
        .outerjoin(comment_author, comment_author.c.id == comments_table.c.user_id)
        .outerjoin(comment_likes, comment_likes.c.comment_id == comments_table.c.id)
        .outerjoin(
            comment_replies, comment_replies.c.comment_id == comments_table.c.id
        )
        .outerjoin(
            viewer_comment_likes,
            viewer_comment_likes.c.comment_id == comments_table.c.id,
        )
        .outerjoin(
            comment_author_follows,
            comment_author_follows.c.followed_id == comments_table.c.user_id,
        )
    )

    return (
        select(
            window.c.id.label(POST_ID),
            window.c.content.label(POST_CONTENT),
            window.c.created_at.label(POST_CREATED_AT),
            window.c.updated_at.label(POST_UPDATED_AT),
            post_author.c.id.label(POST_AUTHOR_ID),
            post_author.c.name.label(POST_AUTHOR_NAME),
            post_author.c.last_name.label(POST_AUTHOR_LAST_NAME),
            post_author.c.username.label(POST_AUTHOR_USERNAME),
            func.coalesce(post_likes.c.like_count, 0).label(POST_LIKE_COUNT),
            func.coalesce(post_comments.c.comment_count, 0).label(POST_COMMENT_COUNT),
            viewer_post_likes.c.post_id.is_not(None).label(POST_IS_LIKED),
            viewer_follows.c.followed_id.is_not(None).label(POST_AUTHOR_IS_FOLLOWED),
            comments_table.c.id.label(COMMENT_ID),
            comments_table.c.post_id.label(COMMENT_POST_ID),
            comments_table.c.content.label(COMMENT_CONTENT),
            comments_table.c.created_at.label(COMMENT_CREATED_AT),
            comments_table.c.updated_at.label(COMMENT_UPDATED_AT),
            comment_author.c.id.label(COMMENT_AUTHOR_ID),
            comment_author.c.name.label(COMMENT_AUTHOR_NAME),
            comment_author.c.last_name.label(COMMENT_AUTHOR_LAST_NAME),
            comment_author.c.username.label(COMMENT_AUTHOR_USERNAME),
            func.coalesce(comment_likes.c.like_count, 0).label(COMMENT_LIKE_COUNT),
            func.coalesce(comment_replies.c.reply_count, 0).label(COMMENT_REPLY_COUNT),
            viewer_comment_likes.c.comment_id.is_not(None).label(COMMENT_IS_LIKED),
            comment_author_follows.c.followed_id.is_not(None).label(
                COMMENT_AUTHOR_IS_FOLLOWED
            ),
        )
        .select_from(joined)
        .order_by(
            window.c.created_at.desc(),
            window.c.id.desc(),
            comments_table.c.created_at.asc(),
            comments_table.c.id.asc(),
        )
    )


def comments_with_replies_projection(post_id: PostId, viewer_id: UserId) -> Select:
    """Join the comments of a post to their counts, viewer flags and replies.

    Args:
        post_id: Post whose comments are read
        viewer_id: User the flags are computed for

    Returns:
        Statement yielding one row per (comment, reply) pair, or one row with
        NULL reply columns for a comment without replies
    """
    window = _comment_window(post_id)
    window_ids = select(window.c.id)

    comment_author = users_table.alias("comment_author")
    reply_author = users_table.alias("reply_author")

    comment_likes = _comment_like_counts(window_ids)
    comment_replies = _comment_reply_counts(window_ids)
    viewer_comment_likes = _viewer_comment_likes(viewer_id)
    viewer_follows = _viewer_follows(viewer_id)

    joined = (
        window.join(comment_author, comment_author.c.id == window.c.user_id)
        .outerjoin(comment_likes, comment_likes.c.comment_id == window.c.id)
        .outerjoin(comment_replies, comment_replies.c.comment_id == window.c.id)
        .outerjoin(
            viewer_comment_likes, viewer_comment_likes.c.comment_id == window.c.id
        )
        .outerjoin(viewer_follows, viewer_follows.c.followed_id == window.c.user_id)
        .outerjoin(replies_table, replies_table.c.comment_id == window.c.id)
        .outerjoin(reply_author, reply_author.c.id == replies_table.c.user_id)
    )

    return (
        select(
            window.c.id.label(COMMENT_ID),
            window.c.post_id.label(COMMENT_POST_ID),
            window.c.content.label(COMMENT_CONTENT),
            window.c.created_at.label(COMMENT_CREATED_AT),
            window.c.updated_at.label(COMMENT_UPDATED_AT),
            comment_author.c.id.label(COMMENT_AUTHOR_ID),
            comment_author.c.name.label(COMMENT_AUTHOR_NAME),
            comment_author.c.last_name.label(COMMENT_AUTHOR_LAST_NAME),
            comment_author.c.username.label(COMMENT_AUTHOR_USERNAME),
            func.coalesce(comment_likes.c.like_count, 0).label(COMMENT_LIKE_COUNT),
            func.coalesce(comment_replies.c.reply_count, 0).label(COMMENT_REPLY_COUNT),
            viewer_comment_likes.c.comment_id.is_not(None).label(COMMENT_IS_LIKED),
            viewer_follows.c.followed_id.is_not(None).label(COMMENT_AUTHOR_IS_FOLLOWED),
            *_reply_columns(reply_author),
        )
        .select_from(joined)
        .order_by(
            window.c.created_at.asc(),
            window.c.id.asc(),
            replies_table.c.created_at.asc(),
            replies_table.c.id.asc(),
        )
    )


def replies_projection(comment_id: CommentId) -> Select:
    """Replies of one comment with their authors, oldest first."""
    reply_author = users_table.alias("reply_author")
    return (
        select(*_reply_columns(reply_author))
        .select_from(
            replies_table.join(reply_author, reply_author.c.id == replies_table.c.user_id)
        )
        .where(replies_table.c.comment_id == comment_id)
        .order_by(replies_table.c.created_at.asc(), replies_table.c.id.asc())
    )


def _reply_columns(reply_author) -> list:
    return [
        replies_table.c.id.label(REPLY_ID),
        replies_table.c.comment_id.label(REPLY_COMMENT_ID),
        replies_table.c.message.label(REPLY_MESSAGE),
        replies_table.c.created_at.label(REPLY_CREATED_AT),
        replies_table.c.updated_at.label(REPLY_UPDATED_AT),
        reply_author.c.id.label(REPLY_AUTHOR_ID),
        reply_author.c.name.label(REPLY_AUTHOR_NAME),
        reply_author.c.last_name.label(REPLY_AUTHOR_LAST_NAME),
        reply_author.c.username.label(REPLY_AUTHOR_USERNAME),
    ]
