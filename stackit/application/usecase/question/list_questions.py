"""List questions use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from stackit.config import Settings
from stackit.domain.error import ValidationError
from stackit.domain.model import QuestionSummary
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import QuestionService

# OFFSET is a signed 64-bit integer in PostgreSQL
MAX_OFFSET = 2**63 - 1


class QuestionListItem(BaseModel):
    """Question in a listing or search result."""

    id: str
    title: str
    description: str
    author_id: str
    author_username: str
    author_avatar_url: str | None
    tags: list[str]
    vote_count: int
    answer_count: int
    accepted_answer_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_summary(cls, summary: QuestionSummary) -> "QuestionListItem":
        """Build a list item from a question summary."""
        return cls(
            id=str(summary.id),
            title=summary.title,
            description=summary.description,
            author_id=str(summary.author.id),
            author_username=summary.author.username.root,
            author_avatar_url=summary.author.avatar_url,
            tags=[tag.root for tag in summary.tag_names],
            vote_count=summary.vote_count,
            answer_count=summary.answer_count,
            accepted_answer_id=(
                str(summary.accepted_answer_id)
                if summary.accepted_answer_id
                else None
            ),
            created_at=summary.created_at,
            updated_at=summary.updated_at,
        )


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = 1
    limit: int | None = None  # Falls back to the configured default


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    page: int
    limit: int
    total: int


class ListQuestionsUseCase:
    """Use case for listing questions with sorting and pagination."""

    def __init__(self, question_service: QuestionService, settings: Settings) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            settings: Application settings (pagination limits)
        """
        self.question_service = question_service
        self.settings = settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Sort order and page to fetch

        Returns:
            One page of questions and the overall question count

        Raises:
            ValidationError: If page or limit are out of range
        """
        pagination = self.settings.pagination
        limit = request.limit if request.limit is not None else pagination.default_limit

        if request.page < 1:
            raise ValidationError("page must be at least 1")
        if limit < 1 or limit > pagination.max_limit:
            raise ValidationError(
                f"limit must be between 1 and {pagination.max_limit}"
            )

        offset = (request.page - 1) * limit
        if offset > MAX_OFFSET:
            raise ValidationError("page is out of range")

        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            page=request.page,
            limit=limit,
        ):
            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                limit=limit,
                offset=offset,
            )

            return ListQuestionsResponse(
                questions=[QuestionListItem.from_summary(q) for q in questions],
                page=request.page,
                limit=limit,
                total=total,
            )
