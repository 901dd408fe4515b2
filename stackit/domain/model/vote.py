"""Vote entity.

Votes form the ledger from which question and answer vote counts are
derived. Each user holds at most one vote per target.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import UserId, VoteId, VoteTargetType, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per target (enforced by database unique constraint)
    - Recasting replaces the direction of the existing row
    - Polymorphic reference to the target (question or answer)
    """

    id: VoteId
    user_id: UserId
    target_type: VoteTargetType
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
