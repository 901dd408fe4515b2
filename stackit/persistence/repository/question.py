"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, asc, delete, desc, func, insert, or_, select, update

from stackit.domain.model import Question, QuestionSummary
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import (
    question_to_dict,
    row_to_question,
    row_to_question_summary,
)
from stackit.persistence.tables import (
    answers_table,
    question_tags_table,
    questions_table,
    tags_table,
    users_table,
)

from .base import PostgresRepository

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` is matched literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class PostgresQuestionRepository(PostgresRepository, QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def _summary_select(self) -> Select:
        """Questions joined with their author and answer count."""
        answer_counts = (
            select(
                answers_table.c.question_id,
                func.count().label("answer_count"),
            )
            .group_by(answers_table.c.question_id)
            .subquery()
        )
        return select(
            questions_table,
            users_table.c.username.label("author_username"),
            users_table.c.avatar_url.label("author_avatar_url"),
            func.coalesce(answer_counts.c.answer_count, 0).label("answer_count"),
        ).select_from(
            questions_table.join(
                users_table, users_table.c.id == questions_table.c.author_id
            ).outerjoin(
                answer_counts, answer_counts.c.question_id == questions_table.c.id
            )
        )

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> tag names in insertion order
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(question_tags_table.c.position)
        )
        result = await self._execute(stmt, "question.fetch_tags")

        question_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            question_tag_map[row.question_id].append(row.name)

        return question_tag_map

    async def _to_summaries(self, rows) -> List[QuestionSummary]:
        if not rows:
            return []

        tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
        return [
            row_to_question_summary(row._asdict(), tag_names=tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, optionally locking its row."""
        with logfire.span(
            "question_repository.find_by_id",
            question_id=str(question_id),
            for_update=for_update,
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            if for_update:
                stmt = stmt.with_for_update()

            result = await self._execute(stmt, "question.find_by_id")
            row = result.fetchone()
            if not row:
                return None

            tag_map = await self._fetch_tags_for_questions([row.id])
            return row_to_question(row._asdict(), tag_names=tag_map.get(row.id, []))

    async def find_summary_by_id(
        self, question_id: QuestionId
    ) -> Optional[QuestionSummary]:
        """Find a question with author, tags and answer count."""
        stmt = self._summary_select().where(questions_table.c.id == question_id)
        result = await self._execute(stmt, "question.find_summary_by_id")
        summaries = await self._to_summaries(result.fetchall())
        return summaries[0] if summaries else None

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[QuestionSummary]:
        """Find a page of questions in the requested order."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._summary_select()

            # Ties fall back to newest first, then id, so pages don't overlap
            if sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(desc(questions_table.c.vote_count))
            elif sort == QuestionSortOrder.UNANSWERED:
                stmt = stmt.order_by(asc("answer_count"))
            stmt = stmt.order_by(
                desc(questions_table.c.created_at), desc(questions_table.c.id)
            )

            stmt = stmt.limit(limit).offset(offset)

            result = await self._execute(stmt, "question.find_all")
            questions = await self._to_summaries(result.fetchall())

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self) -> int:
        """Count all questions."""
        stmt = select(func.count()).select_from(questions_table)
        result = await self._execute(stmt, "question.count")
        return result.scalar() or 0

    async def search(self, text: str, limit: int = 100) -> List[QuestionSummary]:
        """Case-insensitive substring search on title, description and tag names."""
        with logfire.span("question_repository.search", query=text, limit=limit):
            pattern = f"%{escape_like(text)}%"

            tag_match = (
                select(question_tags_table.c.question_id)
                .join(tags_table, tags_table.c.id == question_tags_table.c.tag_id)
                .where(question_tags_table.c.question_id == questions_table.c.id)
                .where(tags_table.c.name.ilike(pattern, escape=LIKE_ESCAPE))
                .exists()
            )

            stmt = (
                self._summary_select()
                .where(
                    or_(
                        questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                        questions_table.c.description.ilike(
                            pattern, escape=LIKE_ESCAPE
                        ),
                        tag_match,
                    )
                )
                .order_by(
                    desc(questions_table.c.created_at), desc(questions_table.c.id)
                )
                .limit(limit)
            )

            result = await self._execute(stmt, "question.search")
            questions = await self._to_summaries(result.fetchall())

            logfire.info("Search results", query=text, count=len(questions))
            return questions

    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions asked by a user."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.author_id == author_id)
        )
        result = await self._execute(stmt, "question.count_by_author")
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tag links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=[t.root for t in question.tag_names],
        ):
            existing = await self.find_by_id(question.id)

            question_dict = question_to_dict(question)

            if existing:
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
                await self._execute(stmt, "question.save")

                delete_stmt = delete(question_tags_table).where(
                    question_tags_table.c.question_id == question.id
                )
                await self._execute(delete_stmt, "question.save")
            else:
                stmt = insert(questions_table).values(**question_dict)
                await self._execute(stmt, "question.save")

            if question.tag_names:
                tag_lookup_stmt = select(tags_table.c.id, tags_table.c.name).where(
                    tags_table.c.name.in_([tag.root for tag in question.tag_names])
                )
                tag_result = await self._execute(tag_lookup_stmt, "question.save")
                tag_id_map = {row.name: row.id for row in tag_result.fetchall()}

                links = [
                    {
                        "question_id": question.id,
                        "tag_id": tag_id_map[tag_name.root],
                        "position": position,
                    }
                    for position, tag_name in enumerate(question.tag_names)
                    if tag_name.root in tag_id_map
                ]
                if links:
                    await self._execute(
                        insert(question_tags_table).values(links), "question.save"
                    )

            await self._flush("question.save")
            return question

    async def set_vote_count(self, question_id: QuestionId, vote_count: int) -> None:
        """Overwrite the cached vote count of a question."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(vote_count=vote_count)
        )
        await self._execute(stmt, "question.set_vote_count")
        await self._flush("question.set_vote_count")

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set the question's accepted answer reference."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(accepted_answer_id=answer_id)
        )
        await self._execute(stmt, "question.set_accepted_answer")
        await self._flush("question.set_accepted_answer")
