"""In-memory question repository for testing."""

from typing import Optional

from stackit.domain.model import Author, Question, QuestionSummary
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.value import AnswerId, QuestionId, UserId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _summarize(self, question: Question) -> QuestionSummary:
        author = self._store.users[question.author_id]
        answer_count = sum(
            1 for a in self._store.answers.values() if a.question_id == question.id
        )
        return QuestionSummary(
            id=question.id,
            title=question.title,
            description=question.description,
            author=Author(
                id=author.id, username=author.username, avatar_url=author.avatar_url
            ),
            tag_names=question.tag_names,
            vote_count=question.vote_count,
            answer_count=answer_count,
            accepted_answer_id=question.accepted_answer_id,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )

    @staticmethod
    def _newest_first(summaries: list[QuestionSummary]) -> list[QuestionSummary]:
        return sorted(summaries, key=lambda q: (q.created_at, q.id), reverse=True)

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID (nothing to lock in memory)."""
        return self._store.questions.get(question_id)

    async def find_summary_by_id(
        self, question_id: QuestionId
    ) -> Optional[QuestionSummary]:
        """Find a question summary by ID."""
        question = self._store.questions.get(question_id)
        return self._summarize(question) if question else None

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[QuestionSummary]:
        """Find a page of questions in the requested order."""
        summaries = self._newest_first(
            [self._summarize(q) for q in self._store.questions.values()]
        )

        # Stable sorts keep newest-first among ties
        if sort == QuestionSortOrder.VOTES:
            summaries.sort(key=lambda q: q.vote_count, reverse=True)
        elif sort == QuestionSortOrder.UNANSWERED:
            summaries.sort(key=lambda q: q.answer_count)

        return summaries[offset : offset + limit]

    async def count(self) -> int:
        """Count all questions."""
        return len(self._store.questions)

    async def search(self, text: str, limit: int = 100) -> list[QuestionSummary]:
        """Case-insensitive substring search on title, description and tags."""
        needle = text.lower()
        matches = [
            self._summarize(q)
            for q in self._store.questions.values()
            if needle in q.title.lower()
            or needle in q.description.lower()
            or any(needle in tag.root for tag in q.tag_names)
        ]
        return self._newest_first(matches)[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions asked by a user."""
        return sum(
            1 for q in self._store.questions.values() if q.author_id == author_id
        )

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._store.questions[question.id] = question
        return question

    async def set_vote_count(self, question_id: QuestionId, vote_count: int) -> None:
        """Overwrite the cached vote count of a question."""
        question = self._store.questions[question_id]
        self._store.questions[question_id] = question.model_copy(
            update={"vote_count": vote_count}
        )

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set the question's accepted answer reference."""
        question = self._store.questions[question_id]
        self._store.questions[question_id] = question.model_copy(
            update={"accepted_answer_id": answer_id}
        )
