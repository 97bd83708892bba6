"""Toggle constraint use case."""

from pydantic import BaseModel

from guess.domain.service import ConstraintService
from guess.domain.value import ConstraintId

from .create_constraint import ConstraintResponse


class ToggleConstraintRequest(BaseModel):
    """Toggle constraint request."""

    constraint_id: int


class ToggleConstraintUseCase:
    """Use case for an admin enabling or disabling a constraint."""

    def __init__(self, constraint_service: ConstraintService) -> None:
        self.constraint_service = constraint_service

    async def execute(self, request: ToggleConstraintRequest) -> ConstraintResponse:
        """Execute toggle constraint flow.

        Raises:
            NotFoundError: If the constraint does not exist
        """
        constraint = await self.constraint_service.toggle_constraint(
            ConstraintId(request.constraint_id)
        )
        return ConstraintResponse.from_constraint(constraint)
