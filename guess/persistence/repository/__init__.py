"""PostgreSQL repository implementations."""

from guess.persistence.repository.constraint import PostgresConstraintRepository
from guess.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
    "PostgresConstraintRepository",
]
