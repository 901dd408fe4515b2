"""Get question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.error import NotFoundError
from stackit.domain.model import AnswerSummary
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId

from .list_questions import QuestionListItem


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string from the path


class AnswerItem(BaseModel):
    """Answer shown under a question."""

    id: str
    question_id: str
    content: str
    author_id: str
    author_username: str
    author_avatar_url: str | None
    vote_count: int
    is_accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_summary(cls, summary: AnswerSummary) -> "AnswerItem":
        """Build an answer item from an answer summary."""
        return cls(
            id=str(summary.id),
            question_id=str(summary.question_id),
            content=summary.content,
            author_id=str(summary.author.id),
            author_username=summary.author.username.root,
            author_avatar_url=summary.author.avatar_url,
            vote_count=summary.vote_count,
            is_accepted=summary.is_accepted,
            created_at=summary.created_at,
            updated_at=summary.updated_at,
        )


class GetQuestionResponse(QuestionListItem):
    """Question with its answers."""

    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for showing a question with its answers."""

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Answers come accepted first, then by vote count (highest first), then
        oldest first.

        Raises:
            NotFoundError: If the question does not exist
        """
        try:
            question_id = QuestionId(UUID(request.question_id))
        except ValueError:
            raise NotFoundError("Question", request.question_id)

        summary = await self.question_service.get_summary(question_id)
        answers = await self.answer_service.get_answers_for_question(question_id)

        item = QuestionListItem.from_summary(summary)
        return GetQuestionResponse(
            **item.model_dump(),
            answers=[AnswerItem.from_summary(a) for a in answers],
        )
