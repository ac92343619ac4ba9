"""Comment entity."""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post. Comments are one level deep; replies hang off them."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
