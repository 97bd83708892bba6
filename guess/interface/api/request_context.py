"""Helpers for reading client identity off incoming requests."""

from uuid import UUID, uuid4

from fastapi import Request, Response

PLAYER_COOKIE = "player_id"

# One year, in seconds
PLAYER_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

_IPV4_MAPPED_PREFIX = "::ffff:"


def get_client_ip(request: Request) -> str:
    """Extract the client address.

    Uses the first X-Forwarded-For entry when behind a proxy, otherwise the
    socket peer. IPv4-mapped IPv6 addresses are reduced to plain IPv4.
    """
    ip = request.client.host if request.client else ""
    forwarded = request.headers.get("x-forwarded-for")
    first = forwarded.split(",")[0].strip() if forwarded else ""
    if first:
        ip = first

    if ip.startswith(_IPV4_MAPPED_PREFIX):
        ip = ip[len(_IPV4_MAPPED_PREFIX) :]
    return ip


def resolve_player_id(cookie_value: str | None) -> tuple[str, bool]:
    """Return the player ID from the cookie, minting one if absent or invalid.

    Returns:
        Tuple of (player_id, is_new)
    """
    if cookie_value:
        try:
            return str(UUID(cookie_value)), False
        except ValueError:
            pass
    return str(uuid4()), True


def ensure_player_cookie(response: Response, cookie_value: str | None) -> str:
    """Make sure the response carries a valid player cookie.

    Returns:
        The player ID in effect for this request
    """
    player_id, is_new = resolve_player_id(cookie_value)
    if is_new:
        response.set_cookie(
            PLAYER_COOKIE,
            player_id,
            max_age=PLAYER_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )
    return player_id
