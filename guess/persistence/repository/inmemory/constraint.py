"""In-memory time constraint repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from guess.domain.model.constraint import TimeConstraint
from guess.domain.repository.constraint import ConstraintRepository
from guess.domain.value import ConstraintId, ConstraintKind


class InMemoryConstraintRepository(ConstraintRepository):
    """In-memory implementation of ConstraintRepository for testing."""

    def __init__(self) -> None:
        self._constraints: dict[ConstraintId, TimeConstraint] = {}
        self._next_id = 1

    async def create(
        self,
        start_time: datetime,
        end_time: datetime,
        kind: ConstraintKind,
        enabled: bool,
        note: Optional[str] = None,
    ) -> TimeConstraint:
        """Insert a constraint, assigning the next sequential ID."""
        constraint = TimeConstraint(
            id=ConstraintId(self._next_id),
            start_time=start_time,
            end_time=end_time,
            kind=kind,
            enabled=enabled,
            note=note,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self._constraints[constraint.id] = constraint
        return constraint

    async def find_by_id(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Find a constraint by ID."""
        return self._constraints.get(constraint_id)

    async def find_all(self) -> list[TimeConstraint]:
        """Find all constraints, newest first."""
        return sorted(
            self._constraints.values(),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def toggle(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Flip a constraint's enabled flag."""
        constraint = self._constraints.get(constraint_id)
        if constraint is None:
            return None
        updated = constraint.model_copy(update={"enabled": not constraint.enabled})
        self._constraints[constraint_id] = updated
        return updated

    async def delete(self, constraint_id: ConstraintId) -> bool:
        """Delete a constraint by ID."""
        return self._constraints.pop(constraint_id, None) is not None
