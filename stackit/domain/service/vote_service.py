"""Vote domain service.

Keeps the cached ``vote_count`` of questions and answers equal to the sum of
their ledger rows (+1 per up vote, -1 per down vote).
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

import logfire

from stackit.domain.model.common import utcnow
from stackit.domain.model.vote import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteId,
    VoteTargetType,
    VoteType,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


@dataclass
class TallyResult:
    """Outcome of casting a vote."""

    vote: Vote
    vote_count: int


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def cast_vote(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
        vote_type: VoteType,
    ) -> TallyResult:
        """Record a user's vote on a question or answer and recompute the tally.

        A second vote by the same user on the same target replaces the first.
        The target row is locked first, so concurrent votes on one target are
        applied one after another within their transactions.

        Args:
            user_id: Voting user
            target_type: Question or answer
            target_id: ID of the question or answer
            vote_type: Up or down

        Returns:
            The stored ledger row and the target's new vote count

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            vote_type=vote_type.value,
        ):
            await self._lock_target(target_type, target_id)

            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target_type, target_id
            )
            now = utcnow()
            vote = Vote(
                id=existing.id if existing else VoteId(uuid4()),
                user_id=user_id,
                target_type=target_type,
                target_id=target_id,
                vote_type=vote_type,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            saved = await self.vote_repository.upsert(vote)

            vote_count = await self.vote_repository.tally(target_type, target_id)
            if target_type is VoteTargetType.QUESTION:
                await self.question_service.set_vote_count(
                    QuestionId(target_id), vote_count
                )
            else:
                await self.answer_service.set_vote_count(AnswerId(target_id), vote_count)

            logfire.info(
                "Vote recorded",
                user_id=str(user_id),
                target_type=target_type.value,
                target_id=str(target_id),
                vote_type=vote_type.value,
                replaced=existing is not None,
                vote_count=vote_count,
            )
            return TallyResult(vote=saved, vote_count=vote_count)

    async def _lock_target(self, target_type: VoteTargetType, target_id: UUID) -> None:
        if target_type is VoteTargetType.QUESTION:
            await self.question_service.get_question(
                QuestionId(target_id), for_update=True
            )
        else:
            await self.answer_service.get_answer(AnswerId(target_id), for_update=True)
