"""Admin dashboard use case."""

from datetime import datetime

from pydantic import BaseModel

from guess.application.usecase.constraint import ConstraintResponse
from guess.domain.service import ConstraintService, VoteService

# Number of latest votes listed for moderation
DASHBOARD_VOTES_LIMIT = 50


class AdminVote(BaseModel):
    """Vote as shown to admins."""

    id: int
    value: int
    location: str | None
    created_at: datetime


class GetDashboardResponse(BaseModel):
    """Admin dashboard response."""

    constraints: list[ConstraintResponse]
    votes: list[AdminVote]


class GetDashboardUseCase:
    """Use case for the admin overview of constraints and latest votes.

    Votes are listed regardless of eligibility so admins can moderate
    everything that was submitted.
    """

    def __init__(
        self, constraint_service: ConstraintService, vote_service: VoteService
    ) -> None:
        self.constraint_service = constraint_service
        self.vote_service = vote_service

    async def execute(self) -> GetDashboardResponse:
        """Execute dashboard flow.

        Returns:
            All constraints (newest first) and the latest votes
        """
        constraints = await self.constraint_service.list_constraints()
        votes = await self.vote_service.get_recent_votes(DASHBOARD_VOTES_LIMIT)

        return GetDashboardResponse(
            constraints=[ConstraintResponse.from_constraint(c) for c in constraints],
            votes=[
                AdminVote(
                    id=v.id,
                    value=v.value,
                    location=v.location,
                    created_at=v.created_at,
                )
                for v in votes
            ],
        )
