"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from guess.config import CaptchaSettings, RateLimitSettings, Settings
from guess.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limits

    @provide(scope=Scope.APP)
    def provide_captcha_settings(self, settings: Settings) -> CaptchaSettings:
        """Provide CAPTCHA settings."""
        return settings.captcha
