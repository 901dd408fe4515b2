"""Tag domain service."""

import logfire

from stackit.domain.model.tag import Tag
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def ensure_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Make sure every named tag exists, creating new ones on first use.

        Args:
            tag_names: Normalized tag names

        Returns:
            Tags in the order of ``tag_names``
        """
        with logfire.span(
            "tag_service.ensure_tags", tags=[t.root for t in tag_names]
        ):
            tags = await self.tag_repository.create_missing(tag_names)
            logfire.info("Tags ensured", count=len(tags))
            return tags
