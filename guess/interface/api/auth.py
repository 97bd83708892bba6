"""HTTP Basic authentication for the admin area."""

import secrets

from fastapi.security import HTTPBasicCredentials

from guess.config import AdminSettings
from guess.interface.error import AdminNotConfiguredError, AuthenticationError

ADMIN_REALM = "Admin Area"


def verify_admin(
    credentials: HTTPBasicCredentials | None, settings: AdminSettings
) -> str:
    """Check Basic credentials against the configured admin account.

    Args:
        credentials: Parsed Authorization header, None if absent
        settings: Admin configuration

    Returns:
        The authenticated admin username

    Raises:
        AdminNotConfiguredError: If no admin account is configured
        AuthenticationError: If credentials are missing or wrong
    """
    if not settings.configured:
        raise AdminNotConfiguredError(
            "ADMIN__USER or ADMIN__PASSWORD is not configured on the server."
        )

    if credentials is None:
        raise AuthenticationError("Authentication required.")

    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.user.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.password.encode("utf-8")
    )
    if not (user_ok and password_ok):
        raise AuthenticationError("Invalid credentials.")

    return credentials.username
