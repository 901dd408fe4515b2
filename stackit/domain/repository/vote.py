"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from stackit.domain.model.vote import Vote
from stackit.domain.value import UserId, VoteTargetType


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (question or answer)
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(
        self, target_type: VoteTargetType, target_id: UUID
    ) -> List[Vote]:
        """Find all votes on a specific target."""
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the direction of the user's existing vote.

        The existing row keeps its id and created_at; only vote_type and
        updated_at change.

        Args:
            vote: The vote to record

        Returns:
            The stored ledger row
        """
        pass

    @abstractmethod
    async def tally(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Sum of +1 per up vote and -1 per down vote on a target."""
        pass
