"""Unit tests for folding flat projection rows into read models."""

from datetime import datetime
from uuid import uuid4

import pytest

from social.persistence import aggregation as col
from social.persistence.materializer import (
    MalformedProjectionError,
    fold,
    materialize_comments,
    materialize_posts,
    materialize_replies,
)

NOW = datetime(2024, 1, 1, 12, 0, 0)


def post_row(post_id, comment_id=None, **overrides):
    """One row of the post projection."""
    author_id = uuid4()
    row = {
        col.POST_ID: post_id,
        col.POST_CONTENT: "Hello World",
        col.POST_CREATED_AT: NOW,
        col.POST_UPDATED_AT: NOW,
        col.POST_AUTHOR_ID: author_id,
        col.POST_AUTHOR_NAME: "Ada",
        col.POST_AUTHOR_LAST_NAME: "Lovelace",
        col.POST_AUTHOR_USERNAME: "ada",
        col.POST_LIKE_COUNT: 2,
        col.POST_COMMENT_COUNT: 1 if comment_id else 0,
        col.POST_IS_LIKED: True,
        col.POST_AUTHOR_IS_FOLLOWED: False,
        col.COMMENT_ID: comment_id,
        col.COMMENT_POST_ID: post_id if comment_id else None,
        col.COMMENT_CONTENT: "Nice" if comment_id else None,
        col.COMMENT_CREATED_AT: NOW if comment_id else None,
        col.COMMENT_UPDATED_AT: NOW if comment_id else None,
        col.COMMENT_AUTHOR_ID: author_id if comment_id else None,
        col.COMMENT_AUTHOR_NAME: "Ada" if comment_id else None,
        col.COMMENT_AUTHOR_LAST_NAME: "Lovelace" if comment_id else None,
        col.COMMENT_AUTHOR_USERNAME: "ada" if comment_id else None,
        col.COMMENT_LIKE_COUNT: 0,
        col.COMMENT_REPLY_COUNT: 0,
        col.COMMENT_IS_LIKED: False,
        col.COMMENT_AUTHOR_IS_FOLLOWED: False,
    }
    row.update(overrides)
    return row


def comment_row(comment_id, reply_id=None, **overrides):
    """One row of the comments-with-replies projection."""
    author_id = uuid4()
    row = {
        col.COMMENT_ID: comment_id,
        col.COMMENT_POST_ID: uuid4(),
        col.COMMENT_CONTENT: "Nice",
        col.COMMENT_CREATED_AT: NOW,
        col.COMMENT_UPDATED_AT: NOW,
        col.COMMENT_AUTHOR_ID: author_id,
        col.COMMENT_AUTHOR_NAME: "Grace",
        col.COMMENT_AUTHOR_LAST_NAME: "Hopper",
        col.COMMENT_AUTHOR_USERNAME: "grace",
        col.COMMENT_LIKE_COUNT: 1,
        col.COMMENT_REPLY_COUNT: 1 if reply_id else 0,
        col.COMMENT_IS_LIKED: 1,
        col.COMMENT_AUTHOR_IS_FOLLOWED: 0,
    }
    row.update(reply_columns(comment_id, reply_id))
    row.update(overrides)
    return row


def reply_columns(comment_id, reply_id):
    present = reply_id is not None
    return {
        col.REPLY_ID: reply_id,
        col.REPLY_COMMENT_ID: comment_id if present else None,
        col.REPLY_MESSAGE: "Thanks" if present else None,
        col.REPLY_CREATED_AT: NOW if present else None,
        col.REPLY_UPDATED_AT: NOW if present else None,
        col.REPLY_AUTHOR_ID: uuid4() if present else None,
        col.REPLY_AUTHOR_NAME: "Alan" if present else None,
        col.REPLY_AUTHOR_LAST_NAME: "Turing" if present else None,
        col.REPLY_AUTHOR_USERNAME: "alan" if present else None,
    }


class TestFold:
    """Tests for the generic parent/child fold."""

    def test_groups_children_under_first_seen_parents(self):
        """Parents keep first-seen order and collect their children."""
        # Arrange
        rows = [
            {"p": "b", "c": 1},
            {"p": "a", "c": 2},
            {"p": "b", "c": 3},
        ]

        # Act
        result = fold(
            rows,
            "p",
            "c",
            build_parent=lambda row, children: (row["p"], children),
            build_child=lambda row: row["c"],
        )

        # Assert
        assert result == [("b", [1, 3]), ("a", [2])]

    def test_null_child_adds_no_child(self):
        """A row without a child still yields its parent, with no children."""
        # Arrange
        rows = [{"p": "a", "c": None}]

        # Act
        result = fold(
            rows,
            "p",
            "c",
            build_parent=lambda row, children: (row["p"], children),
            build_child=lambda row: row["c"],
        )

        # Assert
        assert result == [("a", [])]

    def test_empty_rows_give_empty_list(self):
        """No rows means no parents."""
        assert fold([], "p", "c", lambda r, c: r, lambda r: r) == []

    def test_null_parent_id_is_malformed(self):
        """A row without a parent id is a query bug."""
        # Arrange
        rows = [{"p": None, "c": 1}]

        # Act & Assert
        with pytest.raises(MalformedProjectionError) as exc_info:
            fold(rows, "p", "c", lambda r, c: r, lambda r: r)
        assert exc_info.value.column == "p"


class TestMaterializePosts:
    """Tests for folding post projection rows."""

    def test_post_with_comments(self):
        """Rows of one post collapse into one post holding every comment."""
        # Arrange
        post_id = uuid4()
        first, second = uuid4(), uuid4()
        rows = [post_row(post_id, first), post_row(post_id, second)]

        # Act
        posts = materialize_posts(rows)

        # Assert
        assert len(posts) == 1
        assert posts[0].id == post_id
        assert [c.id for c in posts[0].comments] == [first, second]
        assert posts[0].like_count == 2
        assert posts[0].is_liked_by_viewer is True
        assert posts[0].is_author_followed_by_viewer is False
        assert posts[0].author.username.root == "ada"

    def test_post_without_comments(self):
        """A post row with NULL comment columns yields an empty comment list."""
        # Arrange
        rows = [post_row(uuid4())]

        # Act
        posts = materialize_posts(rows)

        # Assert
        assert len(posts) == 1
        assert posts[0].comments == []
        assert posts[0].comment_count == 0

    def test_null_count_is_malformed(self):
        """Counts are never NULL in a well-formed projection."""
        # Arrange
        rows = [post_row(uuid4(), **{col.POST_LIKE_COUNT: None})]

        # Act & Assert
        with pytest.raises(MalformedProjectionError) as exc_info:
            materialize_posts(rows)
        assert exc_info.value.column == col.POST_LIKE_COUNT

    def test_null_flag_is_malformed(self):
        """Flags are never NULL in a well-formed projection."""
        # Arrange
        rows = [post_row(uuid4(), **{col.POST_IS_LIKED: None})]

        # Act & Assert
        with pytest.raises(MalformedProjectionError):
            materialize_posts(rows)


class TestMaterializeComments:
    """Tests for folding comment projection rows."""

    def test_comment_with_replies(self):
        """Replies attach to their comment; integer flags become booleans."""
        # Arrange
        comment_id = uuid4()
        reply_ids = [uuid4(), uuid4()]
        rows = [comment_row(comment_id, reply_id) for reply_id in reply_ids]

        # Act
        comments = materialize_comments(rows)

        # Assert
        assert len(comments) == 1
        assert [r.id for r in comments[0].replies] == reply_ids
        assert comments[0].is_liked_by_viewer is True
        assert comments[0].is_author_followed_by_viewer is False

    def test_comment_without_replies(self):
        """A comment without replies has an empty reply list."""
        # Act
        comments = materialize_comments([comment_row(uuid4())])

        # Assert
        assert comments[0].replies == []


class TestMaterializeReplies:
    """Tests for building reply lists."""

    def test_builds_replies_in_row_order(self):
        """Each row is one reply."""
        # Arrange
        comment_id = uuid4()
        reply_ids = [uuid4(), uuid4()]
        rows = [reply_columns(comment_id, reply_id) for reply_id in reply_ids]

        # Act
        replies = materialize_replies(rows)

        # Assert
        assert [r.id for r in replies] == reply_ids
        assert replies[0].author.username.root == "alan"

    def test_null_reply_id_is_malformed(self):
        """A reply row without an id is a query bug."""
        with pytest.raises(MalformedProjectionError):
            materialize_replies([reply_columns(uuid4(), None)])
