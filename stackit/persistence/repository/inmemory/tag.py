"""In-memory tag repository for testing."""

from uuid import uuid4

from stackit.domain.model.tag import Tag
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find tags by names."""
        return [
            self._store.tags[name.root] for name in names if name.root in self._store.tags
        ]

    async def create_missing(self, names: list[TagName]) -> list[Tag]:
        """Create tags that don't exist yet."""
        for name in names:
            if name.root not in self._store.tags:
                self._store.tags[name.root] = Tag(id=TagId(uuid4()), name=name)
        return [self._store.tags[name.root] for name in names]
