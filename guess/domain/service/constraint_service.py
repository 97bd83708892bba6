"""Time constraint domain service."""

from datetime import datetime

import logfire

from guess.domain.error import NotFoundError
from guess.domain.model import TimeConstraint
from guess.domain.repository import ConstraintRepository
from guess.domain.value import ConstraintId, ConstraintKind, to_utc


class ConstraintService:
    """Domain service for admin-managed time constraints."""

    def __init__(self, constraint_repository: ConstraintRepository) -> None:
        """Initialize constraint service.

        Args:
            constraint_repository: Time constraint repository
        """
        self.constraint_repository = constraint_repository

    async def create_constraint(
        self,
        start_time: datetime,
        end_time: datetime,
        kind: ConstraintKind,
        enabled: bool = True,
        note: str | None = None,
    ) -> TimeConstraint:
        """Create a new time constraint.

        Args:
            start_time: Start of the range (inclusive); naive values are UTC
            end_time: End of the range (inclusive)
            kind: Include or exclude
            enabled: Whether the constraint starts active
            note: Optional admin note

        Returns:
            Created constraint
        """
        start_time = to_utc(start_time)
        end_time = to_utc(end_time)

        with logfire.span("create_constraint", kind=kind.value, enabled=enabled):
            if start_time > end_time:
                # Stored as given; such a range never matches anything
                logfire.warn(
                    "Constraint range is inverted",
                    start_time=start_time.isoformat(),
                    end_time=end_time.isoformat(),
                )
            constraint = await self.constraint_repository.create(
                start_time=start_time,
                end_time=end_time,
                kind=kind,
                enabled=enabled,
                note=note or None,
            )
            logfire.info("Constraint created", constraint_id=constraint.id)
            return constraint

    async def list_constraints(self) -> list[TimeConstraint]:
        """List all constraints, newest first."""
        return await self.constraint_repository.find_all()

    async def toggle_constraint(self, constraint_id: ConstraintId) -> TimeConstraint:
        """Enable a disabled constraint or disable an enabled one.

        Raises:
            NotFoundError: If the constraint does not exist
        """
        with logfire.span("toggle_constraint", constraint_id=constraint_id):
            constraint = await self.constraint_repository.toggle(constraint_id)
            if constraint is None:
                raise NotFoundError("Constraint", str(constraint_id))
            logfire.info(
                "Constraint toggled",
                constraint_id=constraint_id,
                enabled=constraint.enabled,
            )
            return constraint

    async def delete_constraint(self, constraint_id: ConstraintId) -> None:
        """Delete a constraint.

        Raises:
            NotFoundError: If the constraint does not exist
        """
        with logfire.span("delete_constraint", constraint_id=constraint_id):
            deleted = await self.constraint_repository.delete(constraint_id)
            if not deleted:
                raise NotFoundError("Constraint", str(constraint_id))
            logfire.info("Constraint deleted", constraint_id=constraint_id)
