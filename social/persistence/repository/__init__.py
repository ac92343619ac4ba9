"""PostgreSQL repository implementations."""

from social.persistence.repository.comment import PostgresCommentRepository
from social.persistence.repository.feed import PostgresFeedRepository
from social.persistence.repository.follow import PostgresFollowRepository
from social.persistence.repository.like import PostgresLikeRepository
from social.persistence.repository.post import PostgresPostRepository
from social.persistence.repository.reply import PostgresReplyRepository
from social.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReplyRepository",
    "PostgresLikeRepository",
    "PostgresFollowRepository",
    "PostgresFeedRepository",
]
