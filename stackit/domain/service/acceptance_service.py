"""Accepted-answer domain service."""

import logfire

from stackit.domain.error import NotAuthorizedError
from stackit.domain.model import Answer
from stackit.domain.value import AnswerId, UserId

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class AcceptanceService(Service):
    """Domain service for marking a question's accepted answer.

    A question has at most one accepted answer, and only the question's
    author may choose it. ``Question.accepted_answer_id`` and the answers'
    ``is_accepted`` flags are changed together in the same transaction.
    """

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def accept_answer(self, caller_id: UserId, answer_id: AnswerId) -> Answer:
        """Mark an answer as the accepted one for its question.

        Any previously accepted answer of the same question loses its flag.
        Accepting the answer that is already accepted changes nothing.

        Args:
            caller_id: User asking for the change
            answer_id: Answer to accept

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller did not ask the question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            caller_id=str(caller_id),
            answer_id=str(answer_id),
        ):
            answer = await self.answer_service.get_answer(answer_id)
            question = await self.question_service.get_question(
                answer.question_id, for_update=True
            )

            if question.author_id != caller_id:
                logfire.warn(
                    "Accept by non-author",
                    caller_id=str(caller_id),
                    question_id=str(question.id),
                    answer_id=str(answer_id),
                )
                raise NotAuthorizedError(
                    "accept", "answer", str(answer_id), str(caller_id)
                )

            if question.accepted_answer_id == answer.id and answer.is_accepted:
                logfire.info("Answer already accepted", answer_id=str(answer_id))
                return answer

            await self.answer_service.mark_accepted(question.id, answer.id)
            await self.question_service.set_accepted_answer(question.id, answer.id)

            logfire.info(
                "Answer accepted",
                question_id=str(question.id),
                answer_id=str(answer_id),
                previous_answer_id=(
                    str(question.accepted_answer_id)
                    if question.accepted_answer_id
                    else None
                ),
            )
            return answer.model_copy(update={"is_accepted": True})
