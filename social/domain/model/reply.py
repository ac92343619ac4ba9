"""Reply entity."""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, ReplyId, UserId


class Reply(DomainModel):
    """Reply to a comment. Replies are terminal: they cannot be replied to or liked."""

    id: ReplyId
    comment_id: CommentId
    author_id: UserId
    message: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
