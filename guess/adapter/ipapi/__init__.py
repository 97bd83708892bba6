"""ipapi.co geolocation adapter."""

from .client import IpApiGeolocator, MockIpApiGeolocator, RealIpApiGeolocator

__all__ = ["IpApiGeolocator", "RealIpApiGeolocator", "MockIpApiGeolocator"]
