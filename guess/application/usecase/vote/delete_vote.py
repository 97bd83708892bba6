"""Delete vote use case."""

from pydantic import BaseModel

from guess.domain.service import VoteService
from guess.domain.value import VoteId


class DeleteVoteRequest(BaseModel):
    """Delete vote request."""

    vote_id: int


class DeleteVoteResponse(BaseModel):
    """Delete vote response."""

    success: bool
    message: str


class DeleteVoteUseCase:
    """Use case for an admin removing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: DeleteVoteRequest) -> DeleteVoteResponse:
        """Execute delete vote flow.

        Raises:
            NotFoundError: If the vote does not exist
        """
        await self.vote_service.delete_vote(VoteId(request.vote_id))
        return DeleteVoteResponse(success=True, message="Vote deleted")
