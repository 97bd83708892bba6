"""Game domain service."""

import logfire

from guess.domain.model import TimeConstraint, Vote
from guess.domain.repository import ConstraintRepository, VoteRepository
from guess.domain.value import GameStats, VoteId

from .eligibility import filter_eligible_votes
from .stats import compute_game_stats


class GameService:
    """Domain service computing game results from stored votes.

    Loads a snapshot of votes and constraints from the repositories and
    hands it to the pure eligibility and statistics functions.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        constraint_repository: ConstraintRepository,
    ) -> None:
        """Initialize game service.

        Args:
            vote_repository: Vote repository
            constraint_repository: Time constraint repository
        """
        self.vote_repository = vote_repository
        self.constraint_repository = constraint_repository

    async def _snapshot(self) -> tuple[list[Vote], list[TimeConstraint]]:
        votes = await self.vote_repository.find_all()
        constraints = await self.constraint_repository.find_all()
        return votes, constraints

    async def get_eligible_votes(self) -> list[Vote]:
        """Get all votes that currently count toward the game.

        Returns:
            Eligible votes in insertion order
        """
        votes, constraints = await self._snapshot()
        return filter_eligible_votes(votes, constraints)

    async def compute_stats(self, vote_id: VoteId | None = None) -> GameStats:
        """Compute game statistics over the eligible votes.

        Args:
            vote_id: Vote whose winner status is reported

        Returns:
            Game statistics
        """
        with logfire.span("game_service.compute_stats", vote_id=vote_id):
            votes, constraints = await self._snapshot()
            eligible = filter_eligible_votes(votes, constraints)
            stats = compute_game_stats(eligible, vote_id)
            logfire.info(
                "Game stats computed",
                total_votes=len(votes),
                eligible_votes=stats.total_votes,
                average=stats.average,
                target=stats.target,
                winners=len(stats.winner_ids),
            )
            return stats

    async def get_recent_eligible_votes(self, limit: int = 10) -> list[Vote]:
        """Get the latest votes that count toward the game.

        Args:
            limit: Maximum number of votes to return

        Returns:
            Eligible votes ordered newest first
        """
        eligible = await self.get_eligible_votes()
        eligible.sort(key=lambda v: (v.created_at, v.id), reverse=True)
        return eligible[:limit]
