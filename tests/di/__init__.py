"""Mock providers for testing."""

from .captcha import MockCaptchaProvider
from .geolocation import MockGeolocationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCaptchaProvider",
    "MockGeolocationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
