"""
DB Views — Person View

Aggregated read model for people: a person row joined with its aggregate
counters. Serves three call patterns from one join shape:

1. read(person_id) — one person
2. admins() / banned() — administrative listings
3. PersonQuery(...).list() — search, sort and paginate

Every call opens one session from the supplied factory, runs exactly one
statement, and returns fully materialized PersonView objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

import structlog
from pydantic import BaseModel, ConfigDict
from sqlalchemy import Select, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from db_views.config import SortType
from db_views.errors import NotFound, StorageError
from db_views.models.local_user import LocalUser
from db_views.models.person import Person
from db_views.models.person_aggregates import PersonAggregates
from db_views.utils.clock import now
from db_views.utils.pagination import limit_and_offset
from db_views.utils.search import LIKE_ESCAPE, fuzzy_search
from db_views.views.person_sort import (
    DEFAULT_PERSON_SORT,
    PersonSortType,
    post_to_person_sort_type,
)

logger = structlog.get_logger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class PersonRecord(BaseModel):
    """Person columns as exposed by the view."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_name: str | None = None
    avatar: str | None = None
    bio: str | None = None
    local: bool = True
    bot_account: bool = False
    banned: bool = False
    ban_expires: datetime | None = None
    deleted: bool = False
    published: datetime
    updated: datetime | None = None


class PersonCounts(BaseModel):
    """Aggregate counters for one person."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    person_id: int
    post_count: int = 0
    post_score: int = 0
    comment_count: int = 0
    comment_score: int = 0


class PersonQuery(BaseModel):
    """
    Free-form person listing request.

    All fields optional: no search, comment-score ordering, and the
    pagination helper's default page size when left unset.
    """

    sort: SortType | None = None
    search_term: str | None = None
    page: int | None = None
    limit: int | None = None

    async def list(self, session_factory: SessionFactory) -> "list[PersonView]":
        """Run this query. See build_list_query for filter/order/paging rules."""
        return await list_people(session_factory, Query(self))


class PersonView(BaseModel):
    """A person together with their aggregate counts."""

    person: PersonRecord
    counts: PersonCounts

    @classmethod
    def from_row(cls, person: Person, counts: PersonAggregates) -> PersonView:
        return cls(
            person=PersonRecord.model_validate(person),
            counts=PersonCounts.model_validate(counts),
        )

    @classmethod
    async def read(cls, session_factory: SessionFactory, person_id: int) -> PersonView:
        """
        Load one person's view by id.

        Raises:
            NotFound: No person with this id, or the person has no
                aggregates row.
            StorageError: Database failure.
        """
        stmt = all_joins(select(Person).where(Person.id == person_id))
        row = await _fetch_first(session_factory, stmt, "person_view_read", person_id=person_id)
        if row is None:
            raise NotFound(f"person {person_id} not found")
        return cls.from_row(*row)

    @staticmethod
    async def is_admin(session_factory: SessionFactory, person_id: int) -> bool:
        """
        Whether the person's local account carries the admin flag.

        Joins person with local_user only; aggregates are not required.

        Raises:
            NotFound: No person with this id, or the person has no local
                account (federated persons).
            StorageError: Database failure.
        """
        stmt = (
            select(LocalUser.admin)
            .select_from(Person)
            .join(LocalUser, LocalUser.person_id == Person.id)
            .where(Person.id == person_id)
        )
        row = await _fetch_first(session_factory, stmt, "person_view_is_admin", person_id=person_id)
        if row is None:
            raise NotFound(f"local account for person {person_id} not found")
        return bool(row[0])

    @staticmethod
    async def admins(session_factory: SessionFactory) -> list[PersonView]:
        """Non-deleted admins, oldest account first."""
        return await list_people(session_factory, Admins())

    @staticmethod
    async def banned(session_factory: SessionFactory) -> list[PersonView]:
        """Non-deleted persons with a ban in effect now. Order is unspecified."""
        return await list_people(session_factory, Banned())


# ---------------------------------------------------------------------------
# List modes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Admins:
    """List every non-deleted administrator."""


@dataclass(frozen=True)
class Banned:
    """List every non-deleted person whose ban has not expired."""


@dataclass(frozen=True)
class Query:
    """List persons matching a PersonQuery."""

    options: PersonQuery


ListMode = Union[Admins, Banned, Query]


# ---------------------------------------------------------------------------
# Query construction
# ---------------------------------------------------------------------------


def all_joins(stmt: Select) -> Select:
    """
    Join a select(Person) statement to everything a PersonView needs.

    person_aggregates is an inner join: persons without aggregates are
    dropped, never null-padded. local_user is a left join so admin
    predicates can be applied; its columns are not projected.
    """
    return (
        stmt.join(PersonAggregates, PersonAggregates.person_id == Person.id)
        .outerjoin(LocalUser, LocalUser.person_id == Person.id)
        .add_columns(PersonAggregates)
    )


_SORT_COLUMNS = {
    PersonSortType.NEW: Person.published.desc(),
    PersonSortType.OLD: Person.published.asc(),
    PersonSortType.MOST_COMMENTS: PersonAggregates.comment_count.desc(),
    PersonSortType.COMMENT_SCORE: PersonAggregates.comment_score.desc(),
    PersonSortType.POST_SCORE: PersonAggregates.post_score.desc(),
    PersonSortType.POST_COUNT: PersonAggregates.post_count.desc(),
}


def build_list_query(mode: ListMode) -> Select:
    """
    Build the filtered, ordered (and for Query, paginated) statement for a mode.

    Raises:
        InvalidPagination: Query mode with page/limit out of range.
    """
    stmt = all_joins(select(Person))

    if isinstance(mode, Admins):
        return (
            stmt.where(LocalUser.admin.is_(True))
            .where(Person.deleted.is_(False))
            .order_by(Person.published.asc())
        )

    if isinstance(mode, Banned):
        return stmt.where(
            Person.banned.is_(True),
            or_(Person.ban_expires.is_(None), Person.ban_expires > now()),
        ).where(Person.deleted.is_(False))

    options = mode.options

    if options.search_term is not None:
        searcher = fuzzy_search(options.search_term)
        stmt = stmt.where(
            or_(
                Person.name.ilike(searcher, escape=LIKE_ESCAPE),
                Person.display_name.ilike(searcher, escape=LIKE_ESCAPE),
            )
        )

    sort = (
        post_to_person_sort_type(options.sort)
        if options.sort is not None
        else DEFAULT_PERSON_SORT
    )
    stmt = stmt.order_by(_SORT_COLUMNS[sort])

    limit, offset = limit_and_offset(options.page, options.limit)
    return stmt.limit(limit).offset(offset)


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def _mode_name(mode: ListMode) -> str:
    return type(mode).__name__.lower()


async def list_people(session_factory: SessionFactory, mode: ListMode) -> list[PersonView]:
    """
    Run a list mode and materialize every row.

    Raises:
        InvalidPagination: Raised before any session is opened.
        StorageError: Database failure.
    """
    stmt = build_list_query(mode)

    try:
        async with session_factory() as session:
            result = await session.execute(stmt)
            rows = result.all()
    except SQLAlchemyError as e:
        logger.error(
            "person_view_list_failed",
            mode=_mode_name(mode),
            error=str(e),
            error_type=type(e).__name__,
            source="person_view",
        )
        raise StorageError(f"person list ({_mode_name(mode)}) failed") from e

    views = [PersonView.from_row(person, counts) for person, counts in rows]
    logger.debug(
        "person_view_list",
        mode=_mode_name(mode),
        rows=len(views),
        source="person_view",
    )
    return views


async def _fetch_first(
    session_factory: SessionFactory,
    stmt: Select,
    event: str,
    **context: Any,
) -> Any:
    """Execute stmt in a fresh session and return its first row, or None."""
    try:
        async with session_factory() as session:
            result = await session.execute(stmt)
            return result.first()
    except SQLAlchemyError as e:
        logger.error(
            f"{event}_failed",
            error=str(e),
            error_type=type(e).__name__,
            source="person_view",
            **context,
        )
        raise StorageError(f"{event} failed") from e
