"""Repository interfaces for the social domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from social.domain.repository.comment import CommentRepository
from social.domain.repository.feed import FeedRepository
from social.domain.repository.follow import FollowRepository
from social.domain.repository.like import LikeRepository
from social.domain.repository.post import PostRepository
from social.domain.repository.reply import ReplyRepository
from social.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReplyRepository",
    "LikeRepository",
    "FollowRepository",
    "FeedRepository",
]
