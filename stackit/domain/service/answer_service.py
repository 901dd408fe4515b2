"""Answer domain service."""

from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Answer, AnswerSummary
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self, answer_repository: AnswerRepository, question_service: QuestionService
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
        """
        self.answer_repository = answer_repository
        self.question_service = question_service

    async def create_answer(
        self, author_id: UserId, question_id: QuestionId, content: str
    ) -> Answer:
        """Answer a question.

        Args:
            author_id: Answering user
            question_id: Question being answered
            content: Answer body

        Returns:
            The saved answer

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            if not content or not content.strip():
                raise ValidationError("Answer content is required")

            await self.question_service.get_question(question_id)

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                content=content,
            )
            saved = await self.answer_repository.save(answer)

            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer(self, answer_id: AnswerId, for_update: bool = False) -> Answer:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID
            for_update: Lock the answer row for the rest of the transaction

        Returns:
            Answer entity

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span(
            "answer_service.get_answer", answer_id=str(answer_id), for_update=for_update
        ):
            answer = await self.answer_repository.find_by_id(
                answer_id, for_update=for_update
            )
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def get_answers_for_question(
        self, question_id: QuestionId
    ) -> list[AnswerSummary]:
        """Answers to a question, accepted first, then best voted, then oldest."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            return await self.answer_repository.find_by_question(question_id)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers written by a user."""
        return await self.answer_repository.count_by_author(author_id)

    async def set_vote_count(self, answer_id: AnswerId, vote_count: int) -> None:
        """Store the recomputed vote count of an answer."""
        await self.answer_repository.set_vote_count(answer_id, vote_count)

    async def mark_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Flag ``answer_id`` as the accepted answer, clearing any previous one."""
        await self.answer_repository.set_accepted(question_id, answer_id)
