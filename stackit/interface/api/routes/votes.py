"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import VoteTargetType, VoteType
from stackit.interface.api.auth import bearer_scheme, require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    target_type: VoteTargetType = Field(alias="targetType")
    target_id: UUID = Field(alias="targetId")
    vote_type: VoteType = Field(alias="voteType")


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CastVoteResponse:
    """Cast or change a vote on a question or answer.

    A user holds at most one vote per target; voting again replaces its
    direction. The response carries the target's recomputed vote count.

    Example:
        POST /vote
        Authorization: Bearer eyJ...

        Request:
        {"targetType": "answer", "targetId": "...", "voteType": "up"}

        Response:
        {
            "success": true,
            "message": "Vote recorded successfully",
            "vote_id": "...",
            "vote_type": "up",
            "vote_count": 3
        }
    """
    user_id = require_user_id(jwt_service, credentials)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            user_id=user_id,
            target_type=request.target_type,
            target_id=request.target_id,
            vote_type=request.vote_type,
        )
    )
