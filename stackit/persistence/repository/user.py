"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import Email, UserId, Username
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table

from .base import PostgresRepository


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt, "user.find_by_id")
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Normalized email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self._execute(stmt, "user.find_by_email")
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self._execute(stmt, "user.find_by_username")
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If username or email is already taken
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self._execute(stmt, "user.save")

        await self._flush("user.save")
        return user
