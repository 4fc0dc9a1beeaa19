"""
DB Views — Async Engine & Session Factory

Read models take an async_sessionmaker and open one short-lived session per
call. This module builds that factory from settings.DATABASE_URL.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from db_views.config import settings
from db_views.errors import StorageError

logger = structlog.get_logger(__name__)


def create_db_engine(
    database_url: str | None = None,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Create SQLAlchemy async engine and session factory.

    Args:
        database_url: Override for settings.DATABASE_URL.

    Returns:
        (engine, session_factory) tuple.
    """
    url = database_url or settings.DATABASE_URL
    logger.info("database_engine_initializing", source="database")

    engine_kwargs: dict[str, Any] = {"echo": settings.DB_ECHO}
    if not url.startswith("sqlite"):
        # SQLite uses a static pool; sizing options only apply to server databases
        engine_kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )

    engine = create_async_engine(url, **engine_kwargs)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    logger.info("database_engine_ready", source="database")
    return engine, session_factory


async def check_connection(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """
    Health check: verify the database answers a trivial query.

    Raises:
        StorageError: If the connection or query fails.
    """
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__,
            source="database",
        )
        raise StorageError("database health check failed") from e

    logger.info("database_health_check_passed", source="database")
