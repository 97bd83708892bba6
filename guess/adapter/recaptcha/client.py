"""Google reCAPTCHA v2 client implementation."""

import httpx
import logfire

from guess.adapter.error import ProviderError
from guess.domain.service.captcha_service import CaptchaVerifier


class RecaptchaVerifier(CaptchaVerifier):
    """Base class for reCAPTCHA verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealRecaptchaVerifier(RecaptchaVerifier):
    """reCAPTCHA verifier backed by Google's siteverify endpoint."""

    def __init__(
        self,
        secret: str | None,
        verify_url: str = "https://www.google.com/recaptcha/api/siteverify",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize reCAPTCHA verifier.

        Args:
            secret: Server-side reCAPTCHA secret
            verify_url: siteverify endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.secret = secret
        self.verify_url = verify_url
        self.timeout = timeout
        self._transport = transport

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Verify a response token with Google.

        Args:
            token: Response token from the browser widget
            remote_ip: Client address, sent along when known

        Returns:
            True only if Google answers with success true

        Raises:
            ProviderError: If the HTTP request fails
        """
        if not self.secret:
            logfire.error("Missing reCAPTCHA secret")
            return False

        if not token:
            return False

        data = {"secret": self.secret, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.verify_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )
                result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logfire.error("reCAPTCHA verification HTTP error", error=str(e))
            raise ProviderError("reCAPTCHA", f"verification failed: {e}")

        success = result.get("success") is True
        if not success:
            logfire.info(
                "reCAPTCHA rejected token", error_codes=result.get("error-codes")
            )
        return success


class MockRecaptchaVerifier(RecaptchaVerifier):
    """Mock reCAPTCHA verifier for testing.

    Accepts every token except the ones listed as rejected.
    """

    def __init__(self, rejected_tokens: set[str] | None = None) -> None:
        self.rejected_tokens = rejected_tokens or {"bad-token"}
        self.calls: list[tuple[str, str | None]] = []

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Record the call and accept unless the token is rejected."""
        self.calls.append((token, remote_ip))
        return bool(token) and token not in self.rejected_tokens
