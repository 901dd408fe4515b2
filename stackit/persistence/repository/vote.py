"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, case, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import UserId, VoteTargetType, VoteType
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table

from .base import PostgresRepository


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self._execute(stmt, "vote.find_by_user_and_target")
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_target(
        self, target_type: VoteTargetType, target_id: UUID
    ) -> List[Vote]:
        """Find all votes on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self._execute(stmt, "vote.find_by_target")
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """INSERT ... ON CONFLICT (user_id, target_type, target_id) DO UPDATE."""
        stmt = pg_insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(*votes_table.c)

        result = await self._execute(stmt, "vote.upsert")
        row = result.fetchone()
        await self._flush("vote.upsert")
        return row_to_vote(row._asdict())

    async def tally(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Sum of +1 per up vote and -1 per down vote on a target."""
        weight = case((votes_table.c.vote_type == VoteType.UP.value, 1), else_=-1)
        stmt = select(func.coalesce(func.sum(weight), 0)).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self._execute(stmt, "vote.tally")
        return int(result.scalar() or 0)
