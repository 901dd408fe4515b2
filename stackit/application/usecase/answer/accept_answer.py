"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.error import NotFoundError
from stackit.domain.service import AcceptanceService
from stackit.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    user_id: str  # From authenticated user
    answer_id: str  # UUID string from the path


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    success: bool = True
    message: str = "Answer accepted successfully"
    answer_id: str
    question_id: str


class AcceptAnswerUseCase:
    """Use case for a question author choosing the accepted answer."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller did not ask the question
        """
        try:
            answer_id = AnswerId(UUID(request.answer_id))
        except ValueError:
            raise NotFoundError("Answer", request.answer_id)

        answer = await self.acceptance_service.accept_answer(
            UserId(UUID(request.user_id)), answer_id
        )
        return AcceptAnswerResponse(
            answer_id=str(answer.id), question_id=str(answer.question_id)
        )
