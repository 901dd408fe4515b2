"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; changes go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
