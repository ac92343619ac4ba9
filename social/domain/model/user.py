"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Credentials are managed outside this service; a user here is the public
    profile that authors content and follows other users.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    username: Username
    email: str = Field(min_length=3, max_length=255)
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
