"""Get user stats use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.service import AnswerService, QuestionService, UserService
from stackit.domain.value import UserId


class GetUserStatsRequest(BaseModel):
    """Get user stats request."""

    user_id: str  # From authenticated user


class GetUserStatsResponse(BaseModel):
    """Activity counters for a user."""

    questions: int
    answers: int
    reputation: int = 0  # Not tracked yet
    badges: int = 0  # Not tracked yet


class GetUserStatsUseCase:
    """Use case for counting a user's questions and answers."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get user stats use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetUserStatsRequest) -> GetUserStatsResponse:
        """Execute get user stats flow.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_user_stats.execute", user_id=request.user_id):
            await self.user_service.get_by_id(user_id)

            return GetUserStatsResponse(
                questions=await self.question_service.count_by_author(user_id),
                answers=await self.answer_service.count_by_author(user_id),
            )
