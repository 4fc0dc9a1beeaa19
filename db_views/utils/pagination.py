"""
DB Views — Pagination Helper

Turns a caller-facing (page, limit) pair into the LIMIT/OFFSET applied to a
listing query. Pages are 1-based. Bounds come from settings so every
listing shares the same default and maximum page size.
"""

from __future__ import annotations

from db_views.config import settings
from db_views.errors import InvalidPagination


def limit_and_offset(page: int | None, limit: int | None) -> tuple[int, int]:
    """
    Normalize page/limit into (limit, offset).

    Args:
        page: 1-based page number, None for the first page.
        limit: Page size, None for settings.FETCH_LIMIT_DEFAULT.

    Returns:
        Tuple of (limit, offset).

    Raises:
        InvalidPagination: If page < 1 or limit is outside
            1..settings.FETCH_LIMIT_MAX.
    """
    if page is None:
        page = 1
    elif page < 1:
        raise InvalidPagination("Page is < 1")

    if limit is None:
        limit = settings.FETCH_LIMIT_DEFAULT
    elif not 1 <= limit <= settings.FETCH_LIMIT_MAX:
        raise InvalidPagination(
            f"Fetch limit must be between 1 and {settings.FETCH_LIMIT_MAX}"
        )

    offset = limit * (page - 1)
    return limit, offset
