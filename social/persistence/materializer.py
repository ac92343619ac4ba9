"""Fold flat joined rows into nested read models.

A join of parents against one-to-many children yields one row per
(parent, child) pair. The fold walks the rows once, keeping an ordered map
keyed by parent id: the first row of a parent builds it (its counts and
flags are identical on every row of that parent), and every row whose
child id is non-null appends a child. Parents keep first-seen order, which
is the order of the window in the query.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from social.domain.model.feed import AuthorSummary, CommentView, PostView, ReplyView
from social.persistence import aggregation as col

Row = Mapping[str, Any]
P = TypeVar("P")
C = TypeVar("C")


class MalformedProjectionError(RuntimeError):
    """A row is missing a value its query shape guarantees.

    Raised for NULL parent ids, counts or flags. It points at a bug in the
    query, never at bad user input.
    """

    def __init__(self, column: str, value: Any = None):
        self.column = column
        super().__init__(f"Malformed projection: column {column!r} is {value!r}")


def fold(
    rows: Iterable[Row],
    parent_key: str,
    child_key: str,
    build_parent: Callable[[Row, list[C]], P],
    build_child: Callable[[Row], C],
) -> list[P]:
    """Fold (parent, child) rows into parents holding their children.

    Args:
        rows: Flat rows in window order
        parent_key: Column holding the parent id
        child_key: Column holding the child id (NULL when there is no child)
        build_parent: Builds a parent from its first row and its children
        build_child: Builds a child from a row

    Returns:
        One parent per distinct parent id, in first-seen order

    Raises:
        MalformedProjectionError: If a row has no parent id
    """
    parents: dict[Any, tuple[Row, list[C]]] = {}

    for row in rows:
        key = row[parent_key]
        if key is None:
            raise MalformedProjectionError(parent_key)

        if key not in parents:
            parents[key] = (row, [])

        if row[child_key] is not None:
            parents[key][1].append(build_child(row))

    return [build_parent(first, children) for first, children in parents.values()]


def _count(row: Row, column: str) -> int:
    value = row[column]
    if value is None or value < 0:
        raise MalformedProjectionError(column, value)
    return int(value)


def _flag(row: Row, column: str) -> bool:
    value = row[column]
    if value is None:
        raise MalformedProjectionError(column)
    return bool(value)


def _author(row: Row, prefix: str) -> AuthorSummary:
    return AuthorSummary(
        id=row[f"{prefix}_id"],
        name=row[f"{prefix}_name"],
        last_name=row[f"{prefix}_last_name"],
        username=row[f"{prefix}_username"],
    )


def build_reply(row: Row) -> ReplyView:
    return ReplyView(
        id=row[col.REPLY_ID],
        comment_id=row[col.REPLY_COMMENT_ID],
        message=row[col.REPLY_MESSAGE],
        author=_author(row, "reply_author"),
        created_at=row[col.REPLY_CREATED_AT],
        updated_at=row[col.REPLY_UPDATED_AT],
    )


def build_comment(row: Row, replies: list[ReplyView] | None = None) -> CommentView:
    return CommentView(
        id=row[col.COMMENT_ID],
        post_id=row[col.COMMENT_POST_ID],
        content=row[col.COMMENT_CONTENT],
        author=_author(row, "comment_author"),
        created_at=row[col.COMMENT_CREATED_AT],
        updated_at=row[col.COMMENT_UPDATED_AT],
        like_count=_count(row, col.COMMENT_LIKE_COUNT),
        reply_count=_count(row, col.COMMENT_REPLY_COUNT),
        is_liked_by_viewer=_flag(row, col.COMMENT_IS_LIKED),
        is_author_followed_by_viewer=_flag(row, col.COMMENT_AUTHOR_IS_FOLLOWED),
        replies=replies or [],
    )


def build_post(row: Row, comments: list[CommentView]) -> PostView:
    return PostView(
        id=row[col.POST_ID],
        content=row[col.POST_CONTENT],
        author=_author(row, "post_author"),
        created_at=row[col.POST_CREATED_AT],
        updated_at=row[col.POST_UPDATED_AT],
        like_count=_count(row, col.POST_LIKE_COUNT),
        comment_count=_count(row, col.POST_COMMENT_COUNT),
        is_liked_by_viewer=_flag(row, col.POST_IS_LIKED),
        is_author_followed_by_viewer=_flag(row, col.POST_AUTHOR_IS_FOLLOWED),
        comments=comments,
    )


def materialize_posts(rows: Iterable[Row]) -> list[PostView]:
    """Fold post projection rows into posts with their comments."""
    return fold(rows, col.POST_ID, col.COMMENT_ID, build_post, build_comment)


def materialize_comments(rows: Iterable[Row]) -> list[CommentView]:
    """Fold comment projection rows into comments with their replies."""
    return fold(rows, col.COMMENT_ID, col.REPLY_ID, build_comment, build_reply)


def materialize_replies(rows: Iterable[Row]) -> list[ReplyView]:
    """Build replies from reply projection rows. Replies have no children."""
    replies = []
    for row in rows:
        if row[col.REPLY_ID] is None:
            raise MalformedProjectionError(col.REPLY_ID)
        replies.append(build_reply(row))
    return replies
