"""
DB Views — Person Aggregates Model

Derived per-person counters. One row per person, maintained by the
aggregation triggers; read-only from the view layer.
"""

from __future__ import annotations

from sqlalchemy import INTEGER, BIGINT, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from db_views.models.base import Base


class PersonAggregates(Base):
    """Post/comment counts and scores for a single person (1:1 with person)."""

    __tablename__ = "person_aggregates"

    id: Mapped[int] = mapped_column(INTEGER, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        INTEGER,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Owning person (1:1)",
    )
    post_count: Mapped[int] = mapped_column(
        BIGINT, nullable=False, default=0, server_default="0"
    )
    post_score: Mapped[int] = mapped_column(
        BIGINT, nullable=False, default=0, server_default="0"
    )
    comment_count: Mapped[int] = mapped_column(
        BIGINT, nullable=False, default=0, server_default="0"
    )
    comment_score: Mapped[int] = mapped_column(
        BIGINT, nullable=False, default=0, server_default="0"
    )

    def __repr__(self) -> str:
        return (
            f"<PersonAggregates person_id={self.person_id!r} "
            f"posts={self.post_count!r} comments={self.comment_count!r}>"
        )
