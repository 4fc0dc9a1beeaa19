"""
SQLAlchemy 2.0 async DeclarativeBase for DB Views.

All models inherit from this Base.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB Views database models."""
    pass
