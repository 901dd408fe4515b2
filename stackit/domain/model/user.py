"""User aggregate root.

Users register with a username, email and password, and can edit a small
set of profile fields afterwards.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import Email, UserId, UserRole, Username, WebsiteUrl


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Username and email are unique across users (enforced by repository/DB)
    - Only the bcrypt hash of the password is stored
    - Users are never hard-deleted
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    website: Optional[WebsiteUrl] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    last_login_at: Optional[datetime] = None


class Author(DomainModel):
    """Public author info embedded in question and answer listings."""

    id: UserId
    username: Username
    avatar_url: Optional[str] = None
