"""Functional tests for provider failure classification.

All tests use real or constructed exception objects — no mocks, no stubs.
"""

import asyncio

import httpx
import pytest
from pydantic_ai.exceptions import ModelHTTPError, ModelAPIError

from chat_assist._provider_errors import (
    ProviderUnavailable,
    UnavailableReason,
    classify_provider_error,
)


def _status_error(status_code: int, body: str = "") -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://api-inference.huggingface.co/models/x")
    response = httpx.Response(status_code=status_code, text=body, request=request)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


# ---------------------------------------------------------------------------
# pydantic-ai model errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("code", "reason"),
    [
        (401, UnavailableReason.AUTH),
        (403, UnavailableReason.AUTH),
        (404, UnavailableReason.NOT_FOUND),
        (429, UnavailableReason.RATE_LIMITED),
        (500, UnavailableReason.SERVER_ERROR),
        (503, UnavailableReason.SERVER_ERROR),
        (400, UnavailableReason.CLIENT_ERROR),
        (418, UnavailableReason.CLIENT_ERROR),
    ],
)
def test_classify_model_http_error(code, reason):
    e = ModelHTTPError(code, "test-model", body="details")
    got, msg = classify_provider_error(e)
    assert got == reason
    assert f"HTTP {code}" in msg


def test_classify_model_http_error_omits_body():
    e = ModelHTTPError(401, "test-model", body="Invalid key sk-live-secret")
    _, msg = classify_provider_error(e)
    assert "sk-live-secret" not in msg


def test_classify_model_api_error_is_network():
    e = ModelAPIError("test-model", "Connection refused")
    reason, _ = classify_provider_error(e)
    assert reason == UnavailableReason.NETWORK


# ---------------------------------------------------------------------------
# httpx errors
# ---------------------------------------------------------------------------


def test_classify_httpx_status_error():
    reason, msg = classify_provider_error(_status_error(502))
    assert reason == UnavailableReason.SERVER_ERROR
    assert "HTTP 502" in msg


def test_classify_httpx_rate_limit():
    reason, _ = classify_provider_error(_status_error(429))
    assert reason == UnavailableReason.RATE_LIMITED


def test_classify_httpx_timeout():
    request = httpx.Request("POST", "https://example.com")
    reason, _ = classify_provider_error(httpx.ReadTimeout("slow", request=request))
    assert reason == UnavailableReason.TIMEOUT


def test_classify_httpx_connect_error():
    request = httpx.Request("POST", "https://example.com")
    reason, msg = classify_provider_error(httpx.ConnectError("refused", request=request))
    assert reason == UnavailableReason.NETWORK
    assert "ConnectError" in msg


# ---------------------------------------------------------------------------
# Other failures
# ---------------------------------------------------------------------------


def test_classify_asyncio_timeout():
    reason, _ = classify_provider_error(asyncio.TimeoutError())
    assert reason == UnavailableReason.TIMEOUT


def test_classify_provider_unavailable_keeps_reason():
    e = ProviderUnavailable("groq", UnavailableReason.EMPTY_PAYLOAD, "no choices")
    reason, msg = classify_provider_error(e)
    assert reason == UnavailableReason.EMPTY_PAYLOAD
    assert msg == "groq: empty_payload (no choices)"


def test_classify_unexpected_error():
    reason, msg = classify_provider_error(ValueError("boom"))
    assert reason == UnavailableReason.UNEXPECTED
    assert "ValueError" in msg
    assert "boom" not in msg
