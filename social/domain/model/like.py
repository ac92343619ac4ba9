"""Like entity."""

from datetime import datetime
from typing import Union

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, LikeId, LikeTarget, PostId, UserId


class Like(DomainModel):
    """A user's like on a post or a comment.

    At most one like exists per (target, user).
    """

    id: LikeId
    user_id: UserId
    target: LikeTarget
    target_id: Union[PostId, CommentId]
    created_at: datetime = Field(default_factory=datetime.now)
