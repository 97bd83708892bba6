"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from guess.config import Settings
from guess.domain.repository import ConstraintRepository, VoteRepository
from guess.persistence.database import create_engine, create_session_factory
from guess.persistence.repository import (
    PostgresConstraintRepository,
    PostgresVoteRepository,
)
from guess.util.di.base import ProviderBase
from guess.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base (votes and time constraints)."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories.

    One engine per process; one session per HTTP request, shared by the
    vote and constraint repositories so a vote insert and the statistics
    read that follows it see the same transaction.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request session.

        Commits when the request finishes cleanly; rolls back and re-raises
        otherwise, so a rejected vote never lands half-written.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=str(e))
                raise
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_constraint_repository(self, session: AsyncSession) -> ConstraintRepository:
        return PostgresConstraintRepository(session)
