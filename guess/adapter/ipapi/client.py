"""ipapi.co geolocation client implementation."""

import httpx
import logfire

from guess.adapter.error import ProviderError
from guess.domain.service.geolocation_service import Geolocator


class IpApiGeolocator(Geolocator):
    """Base class for ipapi.co geolocators.

    Provides type distinction for dependency injection.
    """

    pass


class RealIpApiGeolocator(IpApiGeolocator):
    """Geolocator backed by the ipapi.co JSON API."""

    def __init__(
        self,
        base_url: str = "https://ipapi.co",
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize ipapi.co geolocator.

        Args:
            base_url: API root
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def lookup(self, ip_address: str) -> str | None:
        """Resolve an address to "City, Region, Country".

        Args:
            ip_address: Public network address

        Returns:
            Joined location parts, or None if every part is blank

        Raises:
            ProviderError: If the request fails or returns a non-2xx status
        """
        url = f"{self.base_url}/{ip_address}/json/"

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url, timeout=self.timeout)

                if not response.is_success:
                    logfire.warn(
                        "ipapi.co lookup failed",
                        ip_address=ip_address,
                        status_code=response.status_code,
                    )
                    raise ProviderError(
                        "ipapi.co",
                        f"HTTP {response.status_code}",
                        status_code=response.status_code,
                    )

                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError("ipapi.co", f"lookup failed: {e}")

        parts = [data.get("city"), data.get("region"), data.get("country_name")]
        parts = [p for p in parts if p]
        if not parts:
            return None
        return ", ".join(parts)


class MockIpApiGeolocator(IpApiGeolocator):
    """Mock geolocator for testing.

    Returns a fixed location without making real API calls.
    """

    def __init__(self, location: str | None = "Springfield, Oregon, United States"):
        self.location = location
        self.lookups: list[str] = []

    async def lookup(self, ip_address: str) -> str | None:
        """Record the lookup and return the fixed location."""
        self.lookups.append(ip_address)
        return self.location
