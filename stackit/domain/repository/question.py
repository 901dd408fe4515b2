"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from stackit.domain.model.question import Question, QuestionSummary
from stackit.domain.value import AnswerId, QuestionId, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    VOTES = "votes"  # vote_count DESC, then created_at DESC
    UNANSWERED = "unanswered"  # answer count ASC, then created_at DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence and ranked retrieval.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_summary_by_id(
        self, question_id: QuestionId
    ) -> Optional[QuestionSummary]:
        """Find a question with author, tags and answer count."""
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[QuestionSummary]:
        """Find a page of questions in the requested order.

        Args:
            sort: Sort order
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            Question summaries, tags in insertion order
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all questions."""
        pass

    @abstractmethod
    async def search(self, text: str, limit: int = 100) -> List[QuestionSummary]:
        """Case-insensitive substring search on title, description and tag names.

        Args:
            text: Text to look for (matched literally, no wildcards)
            limit: Maximum number of results

        Returns:
            Matching questions without duplicates, newest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions asked by a user."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tag links.

        Tags referenced by ``question.tag_names`` must already exist.
        """
        pass

    @abstractmethod
    async def set_vote_count(self, question_id: QuestionId, vote_count: int) -> None:
        """Overwrite the cached vote count of a question."""
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set the question's accepted answer reference."""
        pass
