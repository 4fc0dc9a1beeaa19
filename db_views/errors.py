"""
DB Views — Error Taxonomy

Every failure a read model can surface to its caller:

- NotFound: a single-row read matched nothing
- InvalidPagination: page/limit rejected by the pagination helper
- StorageError: the database failed (connection, timeout, constraint)

Read models never recover locally; these propagate as-is.
"""

from __future__ import annotations


class DbViewsError(Exception):
    """Base class for all read-model errors."""


class NotFound(DbViewsError):
    """No row matched a single-row read."""


class InvalidPagination(DbViewsError):
    """Page or limit outside the accepted range."""


class StorageError(DbViewsError):
    """The underlying database raised while executing a statement."""
