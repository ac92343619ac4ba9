"""Base model for the stored entities (users, posts, comments, replies,
likes and follows) and the feed read models built from them.
"""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; services derive changed copies with
    ``model_copy(update=...)`` before saving them.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
