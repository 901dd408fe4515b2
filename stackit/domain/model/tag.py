"""Tag entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created the first time a question uses them and are never
    deleted, even when no question references them anymore.
    """

    id: TagId
    name: TagName  # Unique, normalized
    created_at: datetime = Field(default_factory=utcnow)
