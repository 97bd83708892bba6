"""Domain value objects for the game.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from guess.domain.value.identifiers import VoteId

# Inclusive bounds for a submitted guess
MIN_VOTE_VALUE = 0
MAX_VOTE_VALUE = 1000


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ConstraintKind(str, Enum):
    """Kind of time constraint.

    Include constraints restrict counting to their ranges; exclude
    constraints always drop votes in their ranges.
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"


class GameStats(BaseModel):
    """Result of reducing eligible votes to game statistics.

    ``average`` and ``target`` are None when no vote is eligible.
    """

    model_config = ConfigDict(frozen=True)

    average: float | None = None
    target: float | None = None
    is_winner: bool = False
    total_votes: int = 0
    winner_ids: list[VoteId] = Field(default_factory=list)
