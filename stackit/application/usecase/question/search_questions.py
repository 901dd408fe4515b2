"""Search questions use case."""

import logfire
from pydantic import BaseModel

from stackit.config import Settings
from stackit.domain.error import ValidationError
from stackit.domain.service import QuestionService

from .list_questions import QuestionListItem


class SearchQuestionsRequest(BaseModel):
    """Search questions request."""

    query: str | None = None


class SearchQuestionsResponse(BaseModel):
    """Search questions response."""

    query: str
    questions: list[QuestionListItem]


class SearchQuestionsUseCase:
    """Use case for free-text search over titles, descriptions and tags."""

    def __init__(self, question_service: QuestionService, settings: Settings) -> None:
        """Initialize search questions use case.

        Args:
            question_service: Question domain service
            settings: Application settings (result cap)
        """
        self.question_service = question_service
        self.settings = settings

    async def execute(self, request: SearchQuestionsRequest) -> SearchQuestionsResponse:
        """Execute search flow.

        Matching is a case-insensitive substring match; results are newest
        first and capped at the pagination ceiling.

        Raises:
            ValidationError: If the query is missing or blank
        """
        query = (request.query or "").strip()
        if not query:
            raise ValidationError("Search query is required")

        with logfire.span("search_questions.execute", query=query):
            results = await self.question_service.search(
                query, limit=self.settings.pagination.max_limit
            )
            return SearchQuestionsResponse(
                query=query,
                questions=[QuestionListItem.from_summary(q) for q in results],
            )
