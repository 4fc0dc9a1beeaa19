"""
DB Views — Person Model

Identity record for every account the instance knows about, local or
federated. Ban state and soft-deletion are flags on this row; the row itself
is never removed by moderation.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BOOLEAN, INTEGER, TIMESTAMP, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from db_views.models.base import Base


class Person(Base):
    """
    A user account.

    Mutated elsewhere (ban/unban, rename, soft-delete); the read models
    in db_views.views only select from it.
    """

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(
        INTEGER,
        primary_key=True,
        autoincrement=True,
        comment="Person identifier",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Account name (handle)",
    )
    display_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Optional display label shown instead of the name",
    )
    avatar: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Avatar image URL",
    )
    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Profile text",
    )
    local: Mapped[bool] = mapped_column(
        BOOLEAN,
        default=True,
        server_default="true",
        comment="True for accounts registered on this instance",
    )
    bot_account: Mapped[bool] = mapped_column(
        BOOLEAN,
        default=False,
        server_default="false",
        comment="Self-declared automated account",
    )

    # --- Moderation state ---
    banned: Mapped[bool] = mapped_column(
        BOOLEAN,
        default=False,
        server_default="false",
        comment="Ban flag",
    )
    ban_expires: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="Ban expiry — NULL means permanent while banned is true",
    )
    deleted: Mapped[bool] = mapped_column(
        BOOLEAN,
        default=False,
        server_default="false",
        comment="Soft-delete flag",
    )

    # --- Timestamps ---
    published: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Account creation timestamp",
    )
    updated: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="Last profile edit",
    )

    def __repr__(self) -> str:
        return (
            f"<Person id={self.id!r} name={self.name!r} "
            f"banned={self.banned!r} deleted={self.deleted!r}>"
        )
