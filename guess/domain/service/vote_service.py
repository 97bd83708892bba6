"""Vote domain service."""

from datetime import datetime, timedelta, timezone

import logfire

from guess.config import RateLimitSettings
from guess.domain.error import NotFoundError, RateLimitExceededError, ValidationError
from guess.domain.model import Vote
from guess.domain.repository import VoteRepository
from guess.domain.value import MAX_VOTE_VALUE, MIN_VOTE_VALUE, PlayerId, VoteId


class VoteService:
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        rate_limits: RateLimitSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            rate_limits: Per-IP and per-player vote limits
        """
        self.vote_repository = vote_repository
        self.rate_limits = rate_limits

    @staticmethod
    def validate_value(value: int) -> int:
        """Check a guess lies within the allowed range.

        Raises:
            ValidationError: If the value is out of range
        """
        if not MIN_VOTE_VALUE <= value <= MAX_VOTE_VALUE:
            raise ValidationError(
                f"Please submit an integer between {MIN_VOTE_VALUE} and {MAX_VOTE_VALUE}."
            )
        return value

    async def check_rate_limits(
        self,
        ip_address: str | None,
        player_id: PlayerId | None,
        now: datetime | None = None,
    ) -> None:
        """Reject a client that has voted too often within the window.

        The count and the later insert run as separate statements, so
        concurrent requests from one client can each pass the check and
        overshoot the limit by the number in flight.

        Args:
            ip_address: Client network address
            player_id: Player cookie identifier
            now: Current time (defaults to UTC now)

        Raises:
            RateLimitExceededError: If either limit is reached
        """
        now = now or datetime.now(timezone.utc)
        window = self.rate_limits.window_seconds
        since = now - timedelta(seconds=window)

        ip_limit = self.rate_limits.max_votes_per_ip
        if ip_address and ip_limit > 0:
            count = await self.vote_repository.count_by_ip_since(ip_address, since)
            if count >= ip_limit:
                logfire.warn(
                    "IP vote limit reached", ip_address=ip_address, count=count
                )
                raise RateLimitExceededError("address", ip_limit, window)

        player_limit = self.rate_limits.max_votes_per_player
        if player_id and player_limit > 0:
            count = await self.vote_repository.count_by_player_since(player_id, since)
            if count >= player_limit:
                logfire.warn(
                    "Player vote limit reached", player_id=str(player_id), count=count
                )
                raise RateLimitExceededError("player", player_limit, window)

    async def cast_vote(
        self,
        value: int,
        ip_address: str | None = None,
        location: str | None = None,
        player_id: PlayerId | None = None,
    ) -> Vote:
        """Record a new vote.

        Args:
            value: Guessed value
            ip_address: Client network address
            location: Location derived from the address
            player_id: Player cookie identifier

        Returns:
            Created vote

        Raises:
            ValidationError: If the value is out of range
        """
        with logfire.span("cast_vote", value=value, player_id=str(player_id)):
            self.validate_value(value)
            vote = await self.vote_repository.create(
                value=value,
                created_at=datetime.now(timezone.utc),
                ip_address=ip_address,
                location=location,
                player_id=player_id,
            )
            logfire.info("Vote cast", vote_id=vote.id, location=location)
            return vote

    async def get_recent_votes(self, limit: int = 50) -> list[Vote]:
        """Get the latest votes regardless of eligibility.

        Args:
            limit: Maximum number of votes to return

        Returns:
            Votes ordered newest first
        """
        return await self.vote_repository.find_recent(limit)

    async def delete_vote(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: Vote to delete

        Raises:
            NotFoundError: If the vote does not exist
        """
        with logfire.span("delete_vote", vote_id=vote_id):
            deleted = await self.vote_repository.delete(vote_id)
            if not deleted:
                logfire.warn("Delete of non-existent vote", vote_id=vote_id)
                raise NotFoundError("Vote", str(vote_id))
            logfire.info("Vote deleted", vote_id=vote_id)
