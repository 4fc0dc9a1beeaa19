"""
Models package — export all SQLAlchemy models.
"""

from db_views.models.base import Base
from db_views.models.local_user import LocalUser
from db_views.models.person import Person
from db_views.models.person_aggregates import PersonAggregates

__all__ = ["Base", "LocalUser", "Person", "PersonAggregates"]
