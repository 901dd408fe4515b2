"""PostgreSQL implementation of Tag repository."""

from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from stackit.domain.model.tag import Tag
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagName
from stackit.persistence.mappers import row_to_tag
from stackit.persistence.tables import tags_table

from .base import PostgresRepository


class PostgresTagRepository(PostgresRepository, TagRepository):
    """PostgreSQL implementation of TagRepository."""

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self._execute(stmt, "tag.find_by_names")
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def create_missing(self, names: list[TagName]) -> list[Tag]:
        """Insert unknown tags, skipping names another request just created."""
        if not names:
            return []

        stmt = (
            pg_insert(tags_table)
            .values([{"id": uuid4(), "name": name.root} for name in names])
            .on_conflict_do_nothing(index_elements=[tags_table.c.name])
        )
        await self._execute(stmt, "tag.create_missing")
        await self._flush("tag.create_missing")

        by_name = {tag.name.root: tag for tag in await self.find_by_names(names)}
        return [by_name[name.root] for name in names]
