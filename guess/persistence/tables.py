"""SQLAlchemy table definitions for the game.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("value", Integer, nullable=False),
    Column("ip_address", String(64), nullable=True),
    Column("location", Text, nullable=True),  # Derived from ip_address
    Column("player_id", UUID(as_uuid=True), nullable=True),  # Cookie identifier
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("value >= 0 AND value <= 1000", name="value_in_range"),
)

Index("idx_votes_created_at", votes_table.c.created_at)
Index("idx_votes_ip_created_at", votes_table.c.ip_address, votes_table.c.created_at)
Index(
    "idx_votes_player_created_at", votes_table.c.player_id, votes_table.c.created_at
)

# ============================================================================
# VOTE CONSTRAINTS TABLE
# ============================================================================
vote_constraints_table = Table(
    "vote_constraints",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("start_time", TIMESTAMP(timezone=True), nullable=False),
    Column("end_time", TIMESTAMP(timezone=True), nullable=False),
    Column("type", String(16), nullable=False),  # 'include' or 'exclude'
    Column("enabled", Boolean, nullable=False, server_default="true"),
    Column("note", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('include', 'exclude')", name="constraint_type_valid"),
)
