"""initial_schema

Create the schema for the guessing game:
- Votes (guesses in 0..1000 with origin metadata)
- Vote constraints (include/exclude time ranges)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("player_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("value >= 0 AND value <= 1000", name="value_in_range"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_votes_created_at", "votes", ["created_at"])
    op.create_index("idx_votes_ip_created_at", "votes", ["ip_address", "created_at"])
    op.create_index(
        "idx_votes_player_created_at", "votes", ["player_id", "created_at"]
    )

    op.create_table(
        "vote_constraints",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("start_time", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_time", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column(
            "enabled", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "type IN ('include', 'exclude')", name="constraint_type_valid"
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("vote_constraints")
    op.drop_index("idx_votes_player_created_at", table_name="votes")
    op.drop_index("idx_votes_ip_created_at", table_name="votes")
    op.drop_index("idx_votes_created_at", table_name="votes")
    op.drop_table("votes")
