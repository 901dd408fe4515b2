"""In-memory answer repository for testing."""

from typing import Optional

from stackit.domain.model import Answer, AnswerSummary, Author
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID (nothing to lock in memory)."""
        return self._store.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[AnswerSummary]:
        """Answers to a question, accepted first, then votes, then oldest."""
        answers = [
            a for a in self._store.answers.values() if a.question_id == question_id
        ]
        answers.sort(
            key=lambda a: (not a.is_accepted, -a.vote_count, a.created_at, a.id)
        )

        summaries = []
        for answer in answers:
            author = self._store.users[answer.author_id]
            summaries.append(
                AnswerSummary(
                    id=answer.id,
                    question_id=answer.question_id,
                    content=answer.content,
                    author=Author(
                        id=author.id,
                        username=author.username,
                        avatar_url=author.avatar_url,
                    ),
                    vote_count=answer.vote_count,
                    is_accepted=answer.is_accepted,
                    created_at=answer.created_at,
                    updated_at=answer.updated_at,
                )
            )
        return summaries

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers written by a user."""
        return sum(1 for a in self._store.answers.values() if a.author_id == author_id)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._store.answers[answer.id] = answer
        return answer

    async def set_vote_count(self, answer_id: AnswerId, vote_count: int) -> None:
        """Overwrite the cached vote count of an answer."""
        answer = self._store.answers[answer_id]
        self._store.answers[answer_id] = answer.model_copy(
            update={"vote_count": vote_count}
        )

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Flag ``answer_id`` as accepted and clear the flag on its siblings."""
        for answer in list(self._store.answers.values()):
            if answer.question_id != question_id:
                continue
            accepted = answer.id == answer_id
            if answer.is_accepted != accepted:
                self._store.answers[answer.id] = answer.model_copy(
                    update={"is_accepted": accepted}
                )
