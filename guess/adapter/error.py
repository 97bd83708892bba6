"""Errors raised by the external service adapters."""


class AdapterError(Exception):
    """Base error for calls leaving the process."""

    pass


class ProviderError(AdapterError):
    """A third-party API (ipapi.co, reCAPTCHA) failed or answered badly."""

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")
