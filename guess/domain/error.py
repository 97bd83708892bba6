"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class CaptchaVerificationError(DomainError):
    """Raised when a CAPTCHA token is missing or rejected."""

    def __init__(self) -> None:
        super().__init__(
            "CAPTCHA verification failed. "
            "Please confirm you are not a robot and try again."
        )


class RateLimitExceededError(DomainError):
    """Raised when a client has cast too many votes within the window."""

    def __init__(self, scope: str, limit: int, window_seconds: int):
        self.scope = scope
        self.limit = limit
        self.window_seconds = window_seconds
        super().__init__(
            f"Too many votes from this {scope}: "
            f"at most {limit} every {window_seconds} seconds"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
