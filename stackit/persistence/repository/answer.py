"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import asc, desc, func, insert, select, update

from stackit.domain.model import Answer, AnswerSummary
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import (
    answer_to_dict,
    row_to_answer,
    row_to_answer_summary,
)
from stackit.persistence.tables import answers_table, users_table

from .base import PostgresRepository


class PostgresAnswerRepository(PostgresRepository, AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID, optionally locking its row."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._execute(stmt, "answer.find_by_id")
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[AnswerSummary]:
        """Find all answers to a question, accepted first."""
        stmt = (
            select(
                answers_table,
                users_table.c.username.label("author_username"),
                users_table.c.avatar_url.label("author_avatar_url"),
            )
            .select_from(
                answers_table.join(
                    users_table, users_table.c.id == answers_table.c.author_id
                )
            )
            .where(answers_table.c.question_id == question_id)
            .order_by(
                desc(answers_table.c.is_accepted),
                desc(answers_table.c.vote_count),
                asc(answers_table.c.created_at),
                asc(answers_table.c.id),
            )
        )
        result = await self._execute(stmt, "answer.find_by_question")
        return [row_to_answer_summary(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers written by a user."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        result = await self._execute(stmt, "answer.count_by_author")
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        existing = await self.find_by_id(answer.id)

        answer_dict = answer_to_dict(answer)

        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = insert(answers_table).values(**answer_dict)
        await self._execute(stmt, "answer.save")

        await self._flush("answer.save")
        return answer

    async def set_vote_count(self, answer_id: AnswerId, vote_count: int) -> None:
        """Overwrite the cached vote count of an answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(vote_count=vote_count)
        )
        await self._execute(stmt, "answer.set_vote_count")
        await self._flush("answer.set_vote_count")

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Flag ``answer_id`` as accepted and clear the flag on its siblings.

        Two statements, clear first, so the one-accepted-answer index never
        sees two flagged rows.
        """
        clear_stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.id != answer_id)
            .where(answers_table.c.is_accepted.is_(True))
            .values(is_accepted=False)
        )
        await self._execute(clear_stmt, "answer.set_accepted")

        set_stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=True)
        )
        await self._execute(set_stmt, "answer.set_accepted")
        await self._flush("answer.set_accepted")
