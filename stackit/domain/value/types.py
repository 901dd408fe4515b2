"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation and normalization rules.
"""

import re
from enum import Enum
from urllib.parse import urlparse

from pydantic import ConfigDict, Field, field_validator

from stackit.domain.value.common import RootValueObject, ValueObject


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of this vote to a target's tally."""
        return 1 if self is VoteType.UP else -1


class VoteTargetType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class UserRole(str, Enum):
    """Account role."""

    USER = "user"
    ADMIN = "admin"


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Surrounding whitespace is stripped and the name lower-cased, so
    "React " and "react" are the same tag. 1-50 characters, no inner
    whitespace.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        if not isinstance(v, str):
            raise ValueError("Tag name must be a string")
        v = v.strip().lower()
        if not re.match(r"^\S{1,50}$", v):
            raise ValueError("Tag name must be 1-50 characters without spaces")
        return v


class Username(RootValueObject[str]):
    """Public username: 3-50 letters, digits, underscores, hyphens or dots."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not isinstance(v, str):
            raise ValueError("Username must be a string")
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, numbers, '_', '-' or '.'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lower-cased."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email format")
        return v


class WebsiteUrl(RootValueObject[str]):
    """Absolute http(s) URL for a profile website."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL scheme and host."""
        if not isinstance(v, str):
            raise ValueError("Website must be a string")
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Website must be an absolute http(s) URL")
        if len(v) > 2048:
            raise ValueError("Website URL is too long")
        return v


class ProfileUpdate(ValueObject):
    """Editable profile fields.

    Only the fields present in the request are applied (see
    ``model_fields_set``); omitted fields keep their stored value. An empty
    website clears it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: Username | None = None
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    website: WebsiteUrl | None = None
    # Clients send ``avatar``; ``avatar_url`` is accepted too
    avatar_url: str | None = Field(default=None, alias="avatar", max_length=2048)

    @field_validator("website", mode="before")
    @classmethod
    def blank_website_is_none(cls, v):
        """Treat an empty website as "no website"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
