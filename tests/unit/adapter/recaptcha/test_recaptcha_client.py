"""Unit tests for the reCAPTCHA verifier."""

from urllib.parse import parse_qs

import httpx
import pytest

from guess.adapter.error import ProviderError
from guess.adapter.recaptcha import MockRecaptchaVerifier, RealRecaptchaVerifier

VERIFY_URL = "https://recaptcha.test/siteverify"


def make_verifier(handler, secret: str | None = "test-secret") -> RealRecaptchaVerifier:
    return RealRecaptchaVerifier(
        secret=secret,
        verify_url=VERIFY_URL,
        transport=httpx.MockTransport(handler),
    )


class TestRealRecaptchaVerifier:
    @pytest.mark.asyncio
    async def test_success_posts_form(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        ok = await make_verifier(handler).verify("token-123", "203.0.113.5")

        assert ok is True
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert str(requests[0].url) == VERIFY_URL
        form = parse_qs(requests[0].content.decode())
        assert form == {
            "secret": ["test-secret"],
            "response": ["token-123"],
            "remoteip": ["203.0.113.5"],
        }

    @pytest.mark.asyncio
    async def test_remote_ip_is_optional(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        await make_verifier(handler).verify("token-123")

        assert "remoteip" not in parse_qs(requests[0].content.decode())

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"success": False, "error-codes": ["invalid-input-response"]}
            )

        assert await make_verifier(handler).verify("token-123") is False

    @pytest.mark.asyncio
    async def test_truthy_non_boolean_success_is_rejected(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": "true"})

        assert await make_verifier(handler).verify("token-123") is False

    @pytest.mark.asyncio
    async def test_missing_secret_skips_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert await make_verifier(handler, secret=None).verify("token-123") is False

    @pytest.mark.asyncio
    async def test_missing_token_skips_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert await make_verifier(handler).verify("") is False

    @pytest.mark.asyncio
    async def test_network_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(ProviderError):
            await make_verifier(handler).verify("token-123")


class TestMockRecaptchaVerifier:
    @pytest.mark.asyncio
    async def test_rejects_listed_tokens(self):
        verifier = MockRecaptchaVerifier(rejected_tokens={"nope"})

        assert await verifier.verify("nope") is False
        assert await verifier.verify("fine", "10.0.0.1") is True
        assert verifier.calls == [("nope", None), ("fine", "10.0.0.1")]
