"""Async database engine and session dependency."""

import logging
from typing import AsyncGenerator, Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from syntax_club.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_uri: str) -> Dict[str, Any]:
    """Pool options; SQLite connections ignore pool sizing."""
    options: Dict[str, Any] = {"echo": settings.SQL_ECHO, "future": True}
    if not database_uri.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return options


engine = create_async_engine(settings.DATABASE_URI, **_engine_options(settings.DATABASE_URI))

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session per request and roll back on failure."""
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create all tables registered on the SQLModel metadata."""
    # Registers the table models on the metadata
    from syntax_club import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ensured")


async def close_db() -> None:
    """Dispose of the engine connection pool."""
    await engine.dispose()
    logger.info("Database connection closed")
