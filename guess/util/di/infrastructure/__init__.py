"""Infrastructure providers."""

# Import bases
from .captcha import CaptchaProvider
from .geolocation import GeolocationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .captcha import ProdCaptchaProvider  # noqa: F401
from .geolocation import ProdGeolocationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CaptchaProvider",
    "GeolocationProvider",
    "PersistenceProvider",
    "ProdCaptchaProvider",
    "ProdGeolocationProvider",
    "ProdPersistenceProvider",
]
