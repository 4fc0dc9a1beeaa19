"""
DB Views — Clock

Time comparisons in read models use the database clock, rendered into the
statement itself, so each query sees "now" as of its own execution.
"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement


def now() -> ColumnElement:
    """SQL expression for the current timestamp (now() / CURRENT_TIMESTAMP)."""
    return func.now()
