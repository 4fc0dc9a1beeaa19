"""
DB Views — Local User Model

Extension row for accounts registered on this instance. Federated persons
have no local_user row, which is how they are recognized as non-admin.
"""

from __future__ import annotations

from sqlalchemy import BOOLEAN, INTEGER, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from db_views.models.base import Base


class LocalUser(Base):
    """Local account settings and privileges (0..1 per person)."""

    __tablename__ = "local_user"

    id: Mapped[int] = mapped_column(INTEGER, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        INTEGER,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Owning person (1:1 extension)",
    )
    email: Mapped[str | None] = mapped_column(
        String,
        unique=True,
        nullable=True,
        comment="Login email (optional)",
    )
    admin: Mapped[bool] = mapped_column(
        BOOLEAN,
        nullable=False,
        default=False,
        server_default="false",
        comment="Instance administrator privilege",
    )

    def __repr__(self) -> str:
        return f"<LocalUser person_id={self.person_id!r} admin={self.admin!r}>"
