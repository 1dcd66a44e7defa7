"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from social.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine; SQL is echoed when ``debug`` is on."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for one session per request.

    Rows are mapped to frozen domain models by hand, so nothing needs to be
    refreshed after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
