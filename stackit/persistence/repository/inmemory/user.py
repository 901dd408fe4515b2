"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import Email, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user has the same username or email
        """
        for other in self._store.users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        self._store.users[user.id] = user
        return user
