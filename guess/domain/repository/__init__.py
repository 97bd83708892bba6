"""Repository interfaces for the game domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from guess.domain.repository.constraint import ConstraintRepository
from guess.domain.repository.vote import VoteRepository

__all__ = [
    "VoteRepository",
    "ConstraintRepository",
]
