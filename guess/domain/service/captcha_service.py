"""CAPTCHA verification domain service."""

import logfire

from guess.config import CaptchaSettings
from guess.domain.error import CaptchaVerificationError


class CaptchaVerifier:
    """Generic CAPTCHA verifier interface."""

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Check a CAPTCHA response token with the provider.

        Args:
            token: Response token produced by the browser widget
            remote_ip: Client address, forwarded to the provider if known

        Returns:
            True if the provider accepted the token

        Raises:
            ProviderError: If the provider could not be reached
        """
        raise NotImplementedError


class CaptchaService:
    """Domain service guarding vote submission with a CAPTCHA."""

    def __init__(self, verifier: CaptchaVerifier, settings: CaptchaSettings) -> None:
        """Initialize CAPTCHA service.

        Args:
            verifier: Provider-specific verifier
            settings: CAPTCHA configuration
        """
        self.verifier = verifier
        self.settings = settings

    async def ensure_human(self, token: str | None, remote_ip: str | None) -> None:
        """Verify a CAPTCHA token when verification is enabled.

        Provider failures count as a rejected token.

        Raises:
            CaptchaVerificationError: If the token is missing or rejected
        """
        if not self.settings.enabled:
            return

        with logfire.span("captcha_service.ensure_human", remote_ip=remote_ip):
            if not token:
                logfire.info("CAPTCHA token missing")
                raise CaptchaVerificationError()

            try:
                ok = await self.verifier.verify(token, remote_ip)
            except Exception as e:
                logfire.error("CAPTCHA verification error", error=str(e))
                ok = False

            if not ok:
                logfire.warn("CAPTCHA rejected", remote_ip=remote_ip)
                raise CaptchaVerificationError()
