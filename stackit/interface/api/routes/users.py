"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from stackit.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    GetUserStatsRequest,
    GetUserStatsResponse,
    GetUserStatsUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfileResponse,
)
from stackit.domain.service import JWTService
from stackit.domain.value import ProfileUpdate
from stackit.interface.api.auth import bearer_scheme, require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/profile", response_model=UserProfileResponse)
async def get_my_profile(
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserProfileResponse:
    """Get the authenticated user's profile."""
    user_id = require_user_id(jwt_service, credentials)
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )


@router.put("/profile", response_model=UserProfileResponse)
async def update_my_profile(
    changes: ProfileUpdate,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserProfileResponse:
    """Update the authenticated user's profile.

    Only the fields present in the body are changed. An empty ``website``
    clears it.

    Example:
        PUT /users/profile
        Authorization: Bearer eyJ...

        Request:
        {"bio": "Compilers and coffee", "website": "https://alice.dev"}
    """
    user_id = require_user_id(jwt_service, credentials)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(user_id=user_id, changes=changes)
    )


@router.get("/stats", response_model=GetUserStatsResponse)
async def get_my_stats(
    get_user_stats_use_case: FromDishka[GetUserStatsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetUserStatsResponse:
    """Get question and answer counts for the authenticated user."""
    user_id = require_user_id(jwt_service, credentials)
    return await get_user_stats_use_case.execute(GetUserStatsRequest(user_id=user_id))
