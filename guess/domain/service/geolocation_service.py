"""IP geolocation domain service."""

import logfire

LOCAL_NETWORK = "Local network"
UNKNOWN_LOCATION = "Unknown location"

_LOCAL_PREFIXES = ("127.", "10.", "192.168.")


class Geolocator:
    """Generic IP geolocation interface."""

    async def lookup(self, ip_address: str) -> str | None:
        """Resolve an address to a human-readable place.

        Args:
            ip_address: Public network address

        Returns:
            "City, Region, Country" with blank parts dropped, or None if
            the provider knows nothing about the address

        Raises:
            ProviderError: If the provider request fails
        """
        raise NotImplementedError


def is_local_address(ip_address: str | None) -> bool:
    """Check whether an address is missing, loopback or private."""
    if not ip_address or ip_address == "::1":
        return True
    return ip_address.startswith(_LOCAL_PREFIXES)


class GeolocationService:
    """Domain service labelling votes with where they came from.

    Never fails: lookups that error out yield "Unknown location".
    """

    def __init__(self, geolocator: Geolocator) -> None:
        """Initialize geolocation service.

        Args:
            geolocator: Provider-specific geolocator
        """
        self.geolocator = geolocator

    async def locate(self, ip_address: str | None) -> str:
        """Get a display location for a client address.

        Args:
            ip_address: Client network address

        Returns:
            Location string
        """
        if is_local_address(ip_address):
            return LOCAL_NETWORK

        with logfire.span("geolocation_service.locate", ip_address=ip_address):
            try:
                location = await self.geolocator.lookup(ip_address)
            except Exception as e:
                logfire.error(
                    "Error geolocating IP", ip_address=ip_address, error=str(e)
                )
                return UNKNOWN_LOCATION
            return location or UNKNOWN_LOCATION
