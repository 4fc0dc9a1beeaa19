"""Create person, person_aggregates and local_user tables

Revision ID: 001_person_tables
Revises:
Create Date: 2026-10-18

Adds:
  - person (identity, ban state, soft-delete flag)
  - person_aggregates (1:1 counters, FK -> person.id)
  - local_user (0..1 local account row with admin flag, FK -> person.id)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001_person_tables"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. person
    # ------------------------------------------------------------------
    op.create_table(
        "person",
        sa.Column("id", sa.INTEGER(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("local", sa.BOOLEAN(), server_default="true", nullable=False),
        sa.Column("bot_account", sa.BOOLEAN(), server_default="false", nullable=False),
        sa.Column("banned", sa.BOOLEAN(), server_default="false", nullable=False),
        sa.Column("ban_expires", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted", sa.BOOLEAN(), server_default="false", nullable=False),
        sa.Column(
            "published",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("updated", sa.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index("ix_person_name", "person", ["name"], unique=True)
    op.create_index("ix_person_published", "person", ["published"])

    # ------------------------------------------------------------------
    # 2. person_aggregates (1:1, required for every person)
    # ------------------------------------------------------------------
    op.create_table(
        "person_aggregates",
        sa.Column("id", sa.INTEGER(), primary_key=True, autoincrement=True),
        sa.Column(
            "person_id",
            sa.INTEGER(),
            sa.ForeignKey("person.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("post_count", sa.BIGINT(), server_default="0", nullable=False),
        sa.Column("post_score", sa.BIGINT(), server_default="0", nullable=False),
        sa.Column("comment_count", sa.BIGINT(), server_default="0", nullable=False),
        sa.Column("comment_score", sa.BIGINT(), server_default="0", nullable=False),
    )
    op.create_index(
        "ix_person_aggregates_person_id", "person_aggregates", ["person_id"], unique=True
    )

    # ------------------------------------------------------------------
    # 3. local_user (0..1 per person, local accounts only)
    # ------------------------------------------------------------------
    op.create_table(
        "local_user",
        sa.Column("id", sa.INTEGER(), primary_key=True, autoincrement=True),
        sa.Column(
            "person_id",
            sa.INTEGER(),
            sa.ForeignKey("person.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("admin", sa.BOOLEAN(), server_default="false", nullable=False),
    )
    op.create_index("ix_local_user_person_id", "local_user", ["person_id"], unique=True)
    op.create_index("ix_local_user_email", "local_user", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_local_user_email", table_name="local_user")
    op.drop_index("ix_local_user_person_id", table_name="local_user")
    op.drop_table("local_user")
    op.drop_index("ix_person_aggregates_person_id", table_name="person_aggregates")
    op.drop_table("person_aggregates")
    op.drop_index("ix_person_published", table_name="person")
    op.drop_index("ix_person_name", table_name="person")
    op.drop_table("person")
