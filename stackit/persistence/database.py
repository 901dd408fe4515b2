"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stackit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine.

    SQL is echoed when ``settings.debug`` is on. Pooled connections are
    pinged before reuse.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Loaded rows stay readable after commit, and nothing is flushed until a
    repository executes a statement.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
