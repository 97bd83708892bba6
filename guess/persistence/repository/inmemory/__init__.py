"""In-memory repository implementations for testing."""

from .constraint import InMemoryConstraintRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryConstraintRepository",
    "InMemoryVoteRepository",
]
