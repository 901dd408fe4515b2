"""In-memory vote repository for testing."""

from typing import Optional
from uuid import UUID

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import UserId, VoteTargetType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, target type, target id), mirroring the unique
    constraint of the votes table.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a target."""
        return self._store.votes.get((user_id, target_type.value, target_id))

    async def find_by_target(
        self, target_type: VoteTargetType, target_id: UUID
    ) -> list[Vote]:
        """Find all votes on a target."""
        return [
            v
            for v in self._store.votes.values()
            if v.target_type == target_type and v.target_id == target_id
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the direction of the existing one."""
        key = (vote.user_id, vote.target_type.value, vote.target_id)
        existing = self._store.votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"vote_type": vote.vote_type, "updated_at": vote.updated_at}
            )
        self._store.votes[key] = vote
        return vote

    async def tally(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Sum of +1 per up vote and -1 per down vote on a target."""
        return sum(
            v.vote_type.weight for v in await self.find_by_target(target_type, target_id)
        )
