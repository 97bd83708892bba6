"""Application layer DI providers."""

from dishka import Scope, provide

from guess.application.usecase.admin import GetDashboardUseCase
from guess.application.usecase.constraint import (
    CreateConstraintUseCase,
    DeleteConstraintUseCase,
    ToggleConstraintUseCase,
)
from guess.application.usecase.game import GetGameInfoUseCase
from guess.application.usecase.vote import CastVoteUseCase, DeleteVoteUseCase
from guess.config import Settings
from guess.domain.service import (
    CaptchaService,
    ConstraintService,
    GameService,
    GeolocationService,
    VoteService,
)
from guess.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Game use cases
    @provide(scope=Scope.REQUEST)
    def get_game_info_use_case(self, settings: Settings) -> GetGameInfoUseCase:
        """Provide game info use case."""
        return GetGameInfoUseCase(captcha_settings=settings.captcha)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        captcha_service: CaptchaService,
        geolocation_service: GeolocationService,
        vote_service: VoteService,
        game_service: GameService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            captcha_service=captcha_service,
            geolocation_service=geolocation_service,
            vote_service=vote_service,
            game_service=game_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_vote_use_case(self, vote_service: VoteService) -> DeleteVoteUseCase:
        """Provide delete vote use case."""
        return DeleteVoteUseCase(vote_service=vote_service)

    # Constraint use cases
    @provide(scope=Scope.REQUEST)
    def get_create_constraint_use_case(
        self, constraint_service: ConstraintService
    ) -> CreateConstraintUseCase:
        """Provide create constraint use case."""
        return CreateConstraintUseCase(constraint_service=constraint_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_constraint_use_case(
        self, constraint_service: ConstraintService
    ) -> ToggleConstraintUseCase:
        """Provide toggle constraint use case."""
        return ToggleConstraintUseCase(constraint_service=constraint_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_constraint_use_case(
        self, constraint_service: ConstraintService
    ) -> DeleteConstraintUseCase:
        """Provide delete constraint use case."""
        return DeleteConstraintUseCase(constraint_service=constraint_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_dashboard_use_case(
        self,
        constraint_service: ConstraintService,
        vote_service: VoteService,
    ) -> GetDashboardUseCase:
        """Provide admin dashboard use case."""
        return GetDashboardUseCase(
            constraint_service=constraint_service, vote_service=vote_service
        )
