"""Database engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from guess.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Connections run with the UTC time zone so vote and constraint
    timestamps compare consistently.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={
            "server_settings": {"application_name": "guess-api", "timezone": "UTC"}
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Objects are not expired on commit; repositories return immutable
    domain models anyway.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
