"""Domain model entities."""

from social.domain.model.comment import Comment
from social.domain.model.feed import AuthorSummary, CommentView, PostView, ReplyView
from social.domain.model.follow import Follow
from social.domain.model.like import Like
from social.domain.model.post import Post
from social.domain.model.reply import Reply
from social.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reply",
    "Like",
    "Follow",
    # Read models
    "AuthorSummary",
    "PostView",
    "CommentView",
    "ReplyView",
]
