"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.answer import Answer, AnswerSummary
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[AnswerSummary]:
        """Find all answers to a question.

        Ordered accepted first, then by vote count descending, then oldest
        first.
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers written by a user."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        pass

    @abstractmethod
    async def set_vote_count(self, answer_id: AnswerId, vote_count: int) -> None:
        """Overwrite the cached vote count of an answer."""
        pass

    @abstractmethod
    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Flag ``answer_id`` as accepted and clear the flag on its siblings.

        Args:
            question_id: Question both answers belong to
            answer_id: Answer to flag
        """
        pass
