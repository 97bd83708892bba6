"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from guess.domain.service import (
    CaptchaService,
    GameService,
    GeolocationService,
    VoteService,
)
from guess.domain.value import PlayerId

# Size of the activity board returned with each vote
RECENT_VOTES_LIMIT = 10


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    value: int
    captcha_token: str | None = None
    ip_address: str | None = None
    player_id: str | None = None  # UUID string from the player cookie


class RecentVote(BaseModel):
    """Entry on the public activity board."""

    value: int
    location: str | None
    created_at: datetime


class CastVoteResponse(BaseModel):
    """Cast vote response.

    average and target are None when no vote is eligible, which happens
    when the new vote falls outside the active time constraints.
    """

    vote_id: int
    user_value: int
    average: float | None
    target: float | None
    is_winner: bool
    total_votes: int
    recent_votes: list[RecentVote]


class CastVoteUseCase:
    """Use case for submitting a guess and reporting where it stands."""

    def __init__(
        self,
        captcha_service: CaptchaService,
        geolocation_service: GeolocationService,
        vote_service: VoteService,
        game_service: GameService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            captcha_service: CAPTCHA domain service
            geolocation_service: Geolocation domain service
            vote_service: Vote domain service
            game_service: Game domain service
        """
        self.captcha_service = captcha_service
        self.geolocation_service = geolocation_service
        self.vote_service = vote_service
        self.game_service = game_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        CAPTCHA -> range check -> rate limits -> geolocation -> insert ->
        statistics -> activity board.

        Args:
            request: Cast vote request

        Returns:
            Game statistics from the point of view of the new vote

        Raises:
            CaptchaVerificationError: If the CAPTCHA is rejected
            ValidationError: If the value is out of range
            RateLimitExceededError: If the client voted too often
        """
        player_id = PlayerId(UUID(request.player_id)) if request.player_id else None

        with logfire.span("cast_vote_use_case", ip_address=request.ip_address):
            await self.captcha_service.ensure_human(
                request.captcha_token, request.ip_address
            )
            self.vote_service.validate_value(request.value)
            await self.vote_service.check_rate_limits(request.ip_address, player_id)

            location = await self.geolocation_service.locate(request.ip_address)
            vote = await self.vote_service.cast_vote(
                value=request.value,
                ip_address=request.ip_address,
                location=location,
                player_id=player_id,
            )

            stats = await self.game_service.compute_stats(vote.id)
            recent = await self.game_service.get_recent_eligible_votes(
                RECENT_VOTES_LIMIT
            )

        return CastVoteResponse(
            vote_id=vote.id,
            user_value=vote.value,
            average=stats.average,
            target=stats.target,
            is_winner=stats.is_winner,
            total_votes=stats.total_votes,
            recent_votes=[
                RecentVote(value=v.value, location=v.location, created_at=v.created_at)
                for v in recent
            ],
        )
