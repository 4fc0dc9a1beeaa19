"""
DB Views — Fuzzy Search Helper

Builds LIKE/ILIKE patterns from raw user search input. Pattern characters
typed by the user are escaped so they match literally; the only wildcards in
the result are the ones added here.
"""

from __future__ import annotations

# Escape character passed to ILIKE ... ESCAPE alongside every fuzzy pattern
LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape the escape char itself, then % and _."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def fuzzy_search(raw: str) -> str:
    """
    Convert a search string into a case-insensitive contains-pattern.

    Spaces become % so multi-word queries match words separated by
    anything ("john smith" matches "John_Q_Smith").

    Args:
        raw: Search text as typed by the user.

    Returns:
        Pattern for use with ILIKE ... ESCAPE LIKE_ESCAPE.
    """
    escaped = escape_like(raw).replace(" ", "%")
    return f"%{escaped}%"
