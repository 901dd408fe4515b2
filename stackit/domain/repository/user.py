"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.user import User
from stackit.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If username or email is already taken
        """
        pass
