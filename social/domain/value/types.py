"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from social.domain.value.common import RootValueObject, ValueObject

DEFAULT_PAGE_LIMIT = 20


class LikeTarget(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class Username(RootValueObject[str]):
    """Public, unique user name.

    3-30 characters: letters, digits, dots, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z0-9._-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '.', '_' or '-'"
            )
        return v


class Pagination(ValueObject):
    """Window over an ordered result set.

    ``limit`` is the maximum number of parent rows returned, ``offset`` the
    number of parent rows skipped before the window starts.
    """

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, gt=0)
    offset: int = Field(default=0, ge=0)


class Search(ValueObject):
    """Case-insensitive substring filter on content.

    The empty query matches everything.
    """

    query: str = ""

    @property
    def is_empty(self) -> bool:
        return self.query == ""
