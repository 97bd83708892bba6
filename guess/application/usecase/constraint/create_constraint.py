"""Create constraint use case."""

from datetime import datetime

from pydantic import BaseModel

from guess.domain.model import TimeConstraint
from guess.domain.service import ConstraintService
from guess.domain.value import ConstraintKind


class CreateConstraintRequest(BaseModel):
    """Create constraint request."""

    start_time: datetime
    end_time: datetime
    kind: ConstraintKind
    enabled: bool = True
    note: str | None = None


class ConstraintResponse(BaseModel):
    """Time constraint as shown to admins."""

    id: int
    start_time: datetime
    end_time: datetime
    kind: ConstraintKind
    enabled: bool
    note: str | None
    created_at: datetime

    @classmethod
    def from_constraint(cls, constraint: TimeConstraint) -> "ConstraintResponse":
        return cls(
            id=constraint.id,
            start_time=constraint.start_time,
            end_time=constraint.end_time,
            kind=constraint.kind,
            enabled=constraint.enabled,
            note=constraint.note,
            created_at=constraint.created_at,
        )


class CreateConstraintUseCase:
    """Use case for an admin adding a time constraint."""

    def __init__(self, constraint_service: ConstraintService) -> None:
        """Initialize create constraint use case.

        Args:
            constraint_service: Constraint domain service
        """
        self.constraint_service = constraint_service

    async def execute(self, request: CreateConstraintRequest) -> ConstraintResponse:
        """Execute create constraint flow.

        Args:
            request: Create constraint request

        Returns:
            The stored constraint
        """
        constraint = await self.constraint_service.create_constraint(
            start_time=request.start_time,
            end_time=request.end_time,
            kind=request.kind,
            enabled=request.enabled,
            note=request.note,
        )
        return ConstraintResponse.from_constraint(constraint)
