"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .get_user_stats import (
    GetUserStatsRequest,
    GetUserStatsResponse,
    GetUserStatsUseCase,
)
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "GetUserStatsRequest",
    "GetUserStatsResponse",
    "GetUserStatsUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserProfileResponse",
]
