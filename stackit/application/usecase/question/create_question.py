"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.error import ValidationError
from stackit.domain.service import QuestionService
from stackit.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str  # From authenticated user
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    success: bool = True
    message: str = "Question created successfully"
    question_id: str


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            ValidationError: If title, description or tags are missing
        """
        if (
            not request.title
            or not request.title.strip()
            or not request.description
            or not request.description.strip()
            or not request.tags
        ):
            raise ValidationError("Title, description, and tags are required")

        with logfire.span("create_question.execute", author_id=request.author_id):
            question = await self.question_service.create_question(
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
            return CreateQuestionResponse(question_id=str(question.id))
