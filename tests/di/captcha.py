"""Mock CAPTCHA providers for testing."""

from dishka import Scope, provide

from guess.adapter.recaptcha import MockRecaptchaVerifier
from guess.domain.service import CaptchaVerifier
from guess.util.di.infrastructure.captcha import CaptchaProvider


class MockCaptchaProvider(CaptchaProvider):
    """Mock CAPTCHA provider that never calls Google."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_captcha_verifier(self) -> CaptchaVerifier:
        """Provide mock reCAPTCHA verifier."""
        return MockRecaptchaVerifier()
