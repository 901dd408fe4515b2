"""Answer routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.auth import bearer_scheme, require_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


@router.post("/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AcceptAnswerResponse:
    """Mark an answer as the accepted one for its question.

    Only the question's author may accept. Accepting replaces any previously
    accepted answer; accepting the current one again is a no-op.

    Raises:
        NotAuthorizedError: If the caller did not ask the question (403)
        NotFoundError: If the answer does not exist (404)
    """
    user_id = require_user_id(jwt_service, credentials)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(user_id=user_id, answer_id=answer_id)
    )
