"""Domain value objects for the game."""

from guess.domain.value.identifiers import ConstraintId, PlayerId, VoteId
from guess.domain.value.types import (
    MAX_VOTE_VALUE,
    MIN_VOTE_VALUE,
    ConstraintKind,
    GameStats,
    to_utc,
)

__all__ = [
    # Identifiers
    "VoteId",
    "ConstraintId",
    "PlayerId",
    # Types
    "ConstraintKind",
    "GameStats",
    "MIN_VOTE_VALUE",
    "MAX_VOTE_VALUE",
    "to_utc",
]
