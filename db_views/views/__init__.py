from db_views.views.person_sort import PersonSortType, post_to_person_sort_type
from db_views.views.person_view import (
    Admins,
    Banned,
    ListMode,
    PersonCounts,
    PersonQuery,
    PersonRecord,
    PersonView,
    Query,
)

__all__ = [
    "Admins",
    "Banned",
    "ListMode",
    "PersonCounts",
    "PersonQuery",
    "PersonRecord",
    "PersonSortType",
    "PersonView",
    "Query",
    "post_to_person_sort_type",
]
