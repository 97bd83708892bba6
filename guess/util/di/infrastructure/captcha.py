"""CAPTCHA infrastructure providers."""

from dishka import Scope, provide

from guess.adapter.recaptcha import RealRecaptchaVerifier
from guess.config import Settings
from guess.domain.service import CaptchaVerifier
from guess.util.di.base import ProviderBase
from guess.util.error import ConfigurationError


class CaptchaProvider(ProviderBase):
    """CAPTCHA component base."""

    __mock_component__ = "captcha"


class ProdCaptchaProvider(CaptchaProvider):
    """Production CAPTCHA provider using Google reCAPTCHA."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_captcha_verifier(self, settings: Settings) -> CaptchaVerifier:
        """Provide reCAPTCHA verifier.

        Raises:
            ConfigurationError: If verification is enabled without a secret
        """
        if settings.captcha.enabled and not settings.captcha.secret:
            raise ConfigurationError(
                "CAPTCHA__SECRET", "required when CAPTCHA__ENABLED is set"
            )

        return RealRecaptchaVerifier(
            secret=settings.captcha.secret,
            verify_url=settings.captcha.verify_url,
            timeout=settings.captcha.timeout,
        )
