"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .follow_service import FollowService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .reply_service import ReplyService
from .user_service import UserService

__all__ = [
    "CommentService",
    "FeedService",
    "FollowService",
    "JWTService",
    "LikeService",
    "PostService",
    "ReplyService",
    "Service",
    "UserService",
]
