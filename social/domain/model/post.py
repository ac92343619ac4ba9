"""Post entity."""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import PostId, UserId


class Post(DomainModel):
    """A post as stored: content written by one author.

    Like and comment totals are never stored on the post; they are derived
    by the feed queries on every read.
    """

    id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
