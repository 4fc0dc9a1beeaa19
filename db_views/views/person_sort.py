"""
DB Views — Person Sort Translation

People support fewer orderings than posts and comments. The platform-wide
SortType is collapsed into one of six person sort keys; anything without a
person-specific meaning falls back to comment score.
"""

from __future__ import annotations

from enum import Enum

from db_views.config import SortType


class PersonSortType(str, Enum):
    """The person sort types. Converted from SortType by post_to_person_sort_type."""
    NEW = "New"
    OLD = "Old"
    MOST_COMMENTS = "MostComments"
    COMMENT_SCORE = "CommentScore"
    POST_SCORE = "PostScore"
    POST_COUNT = "PostCount"

    def __str__(self) -> str:
        return self.value


DEFAULT_PERSON_SORT = PersonSortType.COMMENT_SCORE

_SORT_MAP: dict[SortType, PersonSortType] = {
    SortType.ACTIVE: PersonSortType.COMMENT_SCORE,
    SortType.HOT: PersonSortType.COMMENT_SCORE,
    SortType.CONTROVERSIAL: PersonSortType.COMMENT_SCORE,
    SortType.NEW: PersonSortType.NEW,
    SortType.NEW_COMMENTS: PersonSortType.NEW,
    SortType.MOST_COMMENTS: PersonSortType.MOST_COMMENTS,
    SortType.OLD: PersonSortType.OLD,
}


def post_to_person_sort_type(sort: SortType) -> PersonSortType:
    """
    Map a generic sort directive to a person sort key.

    Total over its input: Top*, Scaled and any value added to SortType
    later resolve to DEFAULT_PERSON_SORT.
    """
    return _SORT_MAP.get(sort, DEFAULT_PERSON_SORT)
