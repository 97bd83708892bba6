"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from guess.domain.model import TimeConstraint, Vote
from guess.domain.value import ConstraintId, ConstraintKind, PlayerId, VoteId


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    player_id = row.get("player_id")
    return Vote(
        id=VoteId(row["id"]),
        value=row["value"],
        created_at=row["created_at"],
        ip_address=row.get("ip_address"),
        location=row.get("location"),
        player_id=PlayerId(
            UUID(player_id) if isinstance(player_id, str) else player_id
        )
        if player_id
        else None,
    )


def row_to_constraint(row: Dict[str, Any]) -> TimeConstraint:
    """Convert database row to TimeConstraint domain model.

    Args:
        row: Database row as dict

    Returns:
        TimeConstraint domain model
    """
    return TimeConstraint(
        id=ConstraintId(row["id"]),
        start_time=row["start_time"],
        end_time=row["end_time"],
        kind=ConstraintKind(row["type"]),
        enabled=row["enabled"],
        note=row.get("note"),
        created_at=row["created_at"],
    )
