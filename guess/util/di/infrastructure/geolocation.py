"""Geolocation infrastructure providers."""

from dishka import Scope, provide

from guess.adapter.ipapi import RealIpApiGeolocator
from guess.config import Settings
from guess.domain.service import Geolocator
from guess.util.di.base import ProviderBase


class GeolocationProvider(ProviderBase):
    """Geolocation component base."""

    __mock_component__ = "geolocation"


class ProdGeolocationProvider(GeolocationProvider):
    """Production geolocation provider using ipapi.co."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_geolocator(self, settings: Settings) -> Geolocator:
        """Provide ipapi.co geolocator."""
        return RealIpApiGeolocator(
            base_url=settings.geolocation.base_url,
            timeout=settings.geolocation.timeout,
        )
