"""Question domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Question, QuestionSummary
from stackit.domain.repository import QuestionRepository, QuestionSortOrder
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId

from .base import Service
from .tag_service import TagService

MAX_TAGS_PER_QUESTION = 5


def normalize_tag_names(raw_tags: list[str]) -> list[TagName]:
    """Normalize tag names, dropping repeats but keeping first-seen order.

    Raises:
        ValidationError: If a name is malformed, none are given, or there
            are more than MAX_TAGS_PER_QUESTION distinct tags
    """
    names: list[TagName] = []
    for raw in raw_tags:
        try:
            name = TagName(raw)
        except PydanticValidationError:
            raise ValidationError(f"Invalid tag: {raw!r}")
        if name not in names:
            names.append(name)

    if not names:
        raise ValidationError("At least one tag is required")
    if len(names) > MAX_TAGS_PER_QUESTION:
        raise ValidationError(
            f"A question can have at most {MAX_TAGS_PER_QUESTION} tags"
        )
    return names


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    async def create_question(
        self, author_id: UserId, title: str, description: str, tags: list[str]
    ) -> Question:
        """Ask a new question.

        Args:
            author_id: Asking user
            title: Question title
            description: Question body
            tags: Raw tag names; unknown tags are created

        Returns:
            The saved question

        Raises:
            ValidationError: If title, description or tags are missing or invalid
        """
        with logfire.span(
            "question_service.create_question", author_id=str(author_id)
        ):
            tag_names = normalize_tag_names(tags)

            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title.strip(),
                    description=description,
                    author_id=author_id,
                    tag_names=tag_names,
                )
            except PydanticValidationError as e:
                fields = ", ".join(str(err["loc"][0]) for err in e.errors())
                raise ValidationError(f"Invalid question: {fields}")

            await self.tag_service.ensure_tags(tag_names)
            saved = await self.question_repository.save(question)

            logfire.info(
                "Question created",
                question_id=str(saved.id),
                author_id=str(author_id),
                tags=[t.root for t in tag_names],
            )
            return saved

    async def get_question(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Question:
        """Get a question by ID.

        Args:
            question_id: Question ID
            for_update: Lock the question row for the rest of the transaction

        Returns:
            Question entity

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.get_question",
            question_id=str(question_id),
            for_update=for_update,
        ):
            question = await self.question_repository.find_by_id(
                question_id, for_update=for_update
            )
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def get_summary(self, question_id: QuestionId) -> QuestionSummary:
        """Get a question with its author, tags and answer count.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.get_summary", question_id=str(question_id)
        ):
            summary = await self.question_repository.find_summary_by_id(question_id)
            if not summary:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return summary

    async def list_questions(
        self, sort: QuestionSortOrder, limit: int, offset: int
    ) -> tuple[list[QuestionSummary], int]:
        """Get one page of questions and the total question count."""
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                sort=sort, limit=limit, offset=offset
            )
            total = await self.question_repository.count()
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def search(self, text: str, limit: int) -> list[QuestionSummary]:
        """Find questions mentioning ``text`` in title, body or tags."""
        with logfire.span("question_service.search", query=text, limit=limit):
            results = await self.question_repository.search(text, limit=limit)
            logfire.info("Questions searched", query=text, count=len(results))
            return results

    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions asked by a user."""
        return await self.question_repository.count_by_author(author_id)

    async def set_vote_count(self, question_id: QuestionId, vote_count: int) -> None:
        """Store the recomputed vote count of a question."""
        await self.question_repository.set_vote_count(question_id, vote_count)

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Point the question at its accepted answer."""
        await self.question_repository.set_accepted_answer(question_id, answer_id)
