"""
DB Views — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- In-memory SQLite session factory (aiosqlite) with the schema created
- Seeding helper for person + aggregates + local_user rows
- Async test support via pytest-asyncio
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from db_views.models import Base, LocalUser, Person, PersonAggregates


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

pytest_plugins = ("pytest_asyncio",)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Session factory over a fresh in-memory SQLite database.

    StaticPool keeps one connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    yield factory

    await engine.dispose()


SeedPerson = Callable[..., Awaitable[int]]


@pytest.fixture
def add_person(session_factory: async_sessionmaker[AsyncSession]) -> SeedPerson:
    """
    Insert a person and return its id.

    Keyword args:
        name: Account name (required).
        days: Offset in days from BASE_TIME for the published timestamp.
        admin: None for no local_user row (federated), else the admin flag.
        aggregates: False to skip the person_aggregates row.
        counts: Overrides for post/comment counters.
        Any other keyword is passed to Person (banned, ban_expires, ...).
    """

    async def _add(
        name: str,
        days: int = 0,
        admin: bool | None = None,
        aggregates: bool = True,
        counts: dict[str, int] | None = None,
        **person_fields,
    ) -> int:
        async with session_factory() as session:
            person = Person(
                name=name,
                published=BASE_TIME + timedelta(days=days),
                **person_fields,
            )
            session.add(person)
            await session.flush()

            if aggregates:
                session.add(PersonAggregates(person_id=person.id, **(counts or {})))
            if admin is not None:
                session.add(LocalUser(person_id=person.id, admin=admin))

            await session.commit()
            return person.id

    return _add


# ---------------------------------------------------------------------------
# Utility Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    """Current timestamp for tests."""
    return datetime.now(timezone.utc)
