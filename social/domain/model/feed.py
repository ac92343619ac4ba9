"""Read models assembled by the feed queries.

These are projections, not stored rows: every count and viewer flag is
computed for the requesting viewer at read time and the models are never
persisted or updated in place.
"""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, PostId, ReplyId, UserId, Username


class AuthorSummary(DomainModel):
    """Minimal user projection embedded in posts, comments and replies."""

    id: UserId
    name: str
    last_name: str
    username: Username


class ReplyView(DomainModel):
    """Reply projection. Replies are terminal and carry no counts."""

    id: ReplyId
    comment_id: CommentId
    message: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class CommentView(DomainModel):
    """Comment projection with derived counts and viewer-relative flags."""

    id: CommentId
    post_id: PostId
    content: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime
    like_count: int = Field(ge=0)
    reply_count: int = Field(ge=0)
    is_liked_by_viewer: bool
    is_author_followed_by_viewer: bool
    replies: list[ReplyView] = Field(default_factory=list)


class PostView(DomainModel):
    """Post projection with derived counts, viewer flags and its comments."""

    id: PostId
    content: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime
    like_count: int = Field(ge=0)
    comment_count: int = Field(ge=0)
    is_liked_by_viewer: bool
    is_author_followed_by_viewer: bool
    comments: list[CommentView] = Field(default_factory=list)
