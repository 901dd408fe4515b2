"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import UserService
from stackit.domain.value import ProfileUpdate, UserId

from .get_user_profile import UserProfileResponse


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    changes: ProfileUpdate


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Users can change their username, bio, location, website and avatar URL.
    Fields left out of the request keep their current value.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileResponse:
        """Execute update user profile flow.

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated user profile

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new username is taken
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)), request.changes
        )
        return UserProfileResponse.from_user(user)
