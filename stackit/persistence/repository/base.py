"""Shared plumbing for the PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.persistence.error import StoreError


class PostgresRepository:
    """Base class holding the request's session.

    Statements go through ``_execute`` so driver failures surface as
    ``StoreError``. ``IntegrityError`` passes through untouched; domain
    services turn unique-constraint violations into conflicts.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any, operation: str) -> Result:
        try:
            return await self.session.execute(stmt)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logfire.error("Database statement failed", operation=operation, error=str(e))
            raise StoreError(operation) from e

    async def _flush(self, operation: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logfire.error("Database flush failed", operation=operation, error=str(e))
            raise StoreError(operation) from e
