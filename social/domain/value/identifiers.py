"""Strongly typed identifiers for domain entities.

Using NewType prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)
LikeId = NewType("LikeId", UUID)
FollowId = NewType("FollowId", UUID)
