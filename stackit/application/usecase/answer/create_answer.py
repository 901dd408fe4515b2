"""Create answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.service import AnswerService
from stackit.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    author_id: str  # From authenticated user
    question_id: str  # UUID string from the path
    content: str | None = None


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    success: bool = True
    message: str = "Answer posted successfully"
    answer_id: str


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            ValidationError: If content is missing
            NotFoundError: If the question does not exist
        """
        if not request.content or not request.content.strip():
            raise ValidationError("Answer content is required")

        try:
            question_id = QuestionId(UUID(request.question_id))
        except ValueError:
            raise NotFoundError("Question", request.question_id)

        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            answer = await self.answer_service.create_answer(
                author_id=UserId(UUID(request.author_id)),
                question_id=question_id,
                content=request.content,
            )
            return CreateAnswerResponse(answer_id=str(answer.id))
