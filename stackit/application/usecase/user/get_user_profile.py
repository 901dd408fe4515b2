"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import User
from stackit.domain.service import UserService
from stackit.domain.value import UserId, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # From authenticated user


class UserProfileResponse(BaseModel):
    """A user's own profile."""

    id: str
    username: str
    email: str
    avatar_url: str | None
    bio: str | None
    location: str | None
    website: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None

    @classmethod
    def from_user(cls, user: User) -> "UserProfileResponse":
        """Build the response from a user entity."""
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            avatar_url=user.avatar_url,
            bio=user.bio,
            location=user.location,
            website=user.website.root if user.website else None,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )


class GetUserProfileUseCase:
    """Use case for reading the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with user ID

        Returns:
            User profile

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserProfileResponse.from_user(user)
