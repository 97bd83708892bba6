"""Domain layer DI providers."""

from dishka import Scope, provide

from guess.config import CaptchaSettings, RateLimitSettings
from guess.domain.repository import ConstraintRepository, VoteRepository
from guess.domain.service import (
    CaptchaService,
    CaptchaVerifier,
    ConstraintService,
    GameService,
    GeolocationService,
    Geolocator,
    VoteService,
)
from guess.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, rate_limits: RateLimitSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, rate_limits=rate_limits)

    @provide
    def get_constraint_service(
        self, constraint_repository: ConstraintRepository
    ) -> ConstraintService:
        """Provide constraint domain service."""
        return ConstraintService(constraint_repository=constraint_repository)

    @provide
    def get_game_service(
        self,
        vote_repository: VoteRepository,
        constraint_repository: ConstraintRepository,
    ) -> GameService:
        """Provide game domain service."""
        return GameService(
            vote_repository=vote_repository,
            constraint_repository=constraint_repository,
        )

    @provide
    def get_geolocation_service(self, geolocator: Geolocator) -> GeolocationService:
        """Provide geolocation domain service."""
        return GeolocationService(geolocator=geolocator)

    @provide
    def get_captcha_service(
        self, verifier: CaptchaVerifier, settings: CaptchaSettings
    ) -> CaptchaService:
        """Provide CAPTCHA domain service."""
        return CaptchaService(verifier=verifier, settings=settings)
