"""Domain value objects."""

from social.domain.value.identifiers import (
    CommentId,
    FollowId,
    LikeId,
    PostId,
    ReplyId,
    UserId,
)
from social.domain.value.types import (
    DEFAULT_PAGE_LIMIT,
    LikeTarget,
    Pagination,
    Search,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReplyId",
    "LikeId",
    "FollowId",
    # Types
    "DEFAULT_PAGE_LIMIT",
    "LikeTarget",
    "Pagination",
    "Search",
    "Username",
]
