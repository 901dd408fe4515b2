"""Persistence providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stackit.config import Settings
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from stackit.persistence.database import create_engine, create_session_factory
from stackit.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from stackit.util.di.base import ProviderBase
from stackit.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Slot for the repository implementations."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one transaction per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    users = provide(PostgresUserRepository, provides=UserRepository)
    questions = provide(PostgresQuestionRepository, provides=QuestionRepository)
    answers = provide(PostgresAnswerRepository, provides=AnswerRepository)
    tags = provide(PostgresTagRepository, provides=TagRepository)
    votes = provide(PostgresVoteRepository, provides=VoteRepository)

    @provide(scope=Scope.APP)
    def engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's session.

        Committed when the request scope closes cleanly, rolled back when an
        exception propagates out of it.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()
