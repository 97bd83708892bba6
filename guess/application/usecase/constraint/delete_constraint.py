"""Delete constraint use case."""

from pydantic import BaseModel

from guess.domain.service import ConstraintService
from guess.domain.value import ConstraintId


class DeleteConstraintRequest(BaseModel):
    """Delete constraint request."""

    constraint_id: int


class DeleteConstraintResponse(BaseModel):
    """Delete constraint response."""

    success: bool
    message: str


class DeleteConstraintUseCase:
    """Use case for an admin removing a constraint."""

    def __init__(self, constraint_service: ConstraintService) -> None:
        self.constraint_service = constraint_service

    async def execute(
        self, request: DeleteConstraintRequest
    ) -> DeleteConstraintResponse:
        """Execute delete constraint flow.

        Raises:
            NotFoundError: If the constraint does not exist
        """
        await self.constraint_service.delete_constraint(
            ConstraintId(request.constraint_id)
        )
        return DeleteConstraintResponse(success=True, message="Constraint deleted")
