"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Admin credentials missing or wrong."""

    pass


class AdminNotConfiguredError(InterfaceError):
    """Admin credentials are not set on the server."""

    pass
