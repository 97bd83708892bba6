"""Domain model entities for the game."""

from guess.domain.model.constraint import TimeConstraint
from guess.domain.model.vote import Vote

__all__ = [
    "Vote",
    "TimeConstraint",
]
