"""Follow relationship."""

from datetime import datetime

from pydantic import Field, model_validator

from social.domain.model.common import DomainModel
from social.domain.value import FollowId, UserId


class Follow(DomainModel):
    """Directed edge of the follow graph: ``follower_id`` follows ``followed_id``."""

    id: FollowId
    follower_id: UserId
    followed_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_not_self(self) -> "Follow":
        if self.follower_id == self.followed_id:
            raise ValueError("Users cannot follow themselves")
        return self
