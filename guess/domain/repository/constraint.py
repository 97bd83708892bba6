"""Time constraint repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from guess.domain.model.constraint import TimeConstraint
from guess.domain.value import ConstraintId, ConstraintKind


class ConstraintRepository(ABC):
    """Repository for TimeConstraint entity."""

    @abstractmethod
    async def create(
        self,
        start_time: datetime,
        end_time: datetime,
        kind: ConstraintKind,
        enabled: bool,
        note: Optional[str] = None,
    ) -> TimeConstraint:
        """Insert a new constraint.

        Args:
            start_time: Start of the range (inclusive)
            end_time: End of the range (inclusive)
            kind: Include or exclude
            enabled: Whether the constraint is active
            note: Optional admin note

        Returns:
            The stored constraint with its assigned ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Find a constraint by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[TimeConstraint]:
        """Find all constraints, newest first."""
        pass

    @abstractmethod
    async def toggle(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Flip a constraint's enabled flag.

        Args:
            constraint_id: The constraint to toggle

        Returns:
            The updated constraint, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, constraint_id: ConstraintId) -> bool:
        """Delete a constraint.

        Returns:
            True if a constraint was deleted, False if none existed
        """
        pass
