"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.domain.error import ConflictError, NotFoundError, ValidationError
from stackit.domain.model import User
from stackit.domain.model.common import utcnow
from stackit.domain.repository import UserRepository
from stackit.domain.value import ProfileUpdate, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved

    async def update_profile(self, user_id: UserId, changes: ProfileUpdate) -> User:
        """Apply a partial profile update.

        Args:
            user_id: User whose profile changes
            changes: Fields to change; fields not set are left alone

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If the username is explicitly cleared
            ConflictError: If the new username belongs to someone else
        """
        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            fields=sorted(changes.model_fields_set),
        ):
            user = await self.get_by_id(user_id)

            update = {
                field: getattr(changes, field) for field in changes.model_fields_set
            }
            if not update:
                return user

            if "username" in update:
                new_username = update["username"]
                if new_username is None:
                    raise ValidationError("Username cannot be empty")
                if new_username != user.username:
                    existing = await self.user_repository.find_by_username(
                        new_username
                    )
                    if existing and existing.id != user.id:
                        logfire.warn(
                            "Username already taken",
                            user_id=str(user_id),
                            username=new_username.root,
                        )
                        raise ConflictError("Username already taken")

            update["updated_at"] = utcnow()

            try:
                saved = await self.user_repository.save(user.model_copy(update=update))
            except IntegrityError:
                raise ConflictError("Username already taken")

            logfire.info(
                "Profile updated",
                user_id=str(user_id),
                fields=sorted(changes.model_fields_set),
            )
            return saved
