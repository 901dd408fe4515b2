"""Tag repository interface."""

from abc import ABC, abstractmethod

from stackit.domain.model.tag import Tag
from stackit.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def create_missing(self, names: list[TagName]) -> list[Tag]:
        """Create the tags that don't exist yet.

        Concurrent creation of the same name must not fail.

        Args:
            names: Tag names that should exist afterwards

        Returns:
            Tags for all requested names, in request order
        """
        pass
