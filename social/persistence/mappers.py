"""Mappers for converting between database rows and domain models.

Since the domain models are immutable Pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from social.domain.model import Comment, Follow, Like, Post, Reply, User
from social.domain.value import (
    CommentId,
    FollowId,
    LikeId,
    LikeTarget,
    PostId,
    ReplyId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        last_name=row["last_name"],
        username=Username(row["username"]),
        email=row["email"],
        avatar=row.get("avatar"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The author column is named ``user_id`` in storage.
    """
    data = post.model_dump()
    data["user_id"] = data.pop("author_id")
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["user_id"] = data.pop("author_id")
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        message=row["message"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    data = reply.model_dump()
    data["user_id"] = data.pop("author_id")
    return data


def row_to_like(row: Dict[str, Any], target: LikeTarget) -> Like:
    """Convert a post_likes or comment_likes row to Like domain model.

    Args:
        row: Database row as dict
        target: Which like table the row came from

    Returns:
        Like domain model
    """
    target_column = "post_id" if target == LikeTarget.POST else "comment_id"
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target=target,
        target_id=_uuid(row[target_column]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to a row for its target's like table."""
    target_column = "post_id" if like.target == LikeTarget.POST else "comment_id"
    return {
        "id": like.id,
        "user_id": like.user_id,
        target_column: like.target_id,
        "created_at": like.created_at,
    }


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(_uuid(row["id"])),
        follower_id=UserId(_uuid(row["follower_id"])),
        followed_id=UserId(_uuid(row["followed_id"])),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
