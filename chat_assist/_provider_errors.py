"""Failure classification for remote providers.

Every failure a provider can hit collapses into "unavailable"; the reason
recorded here only feeds logs and trace attributes, never reply text.
"""

import asyncio
import enum

import httpx
from pydantic_ai.exceptions import ModelAPIError, ModelHTTPError


class UnavailableReason(enum.Enum):
    NOT_CONFIGURED = "not_configured"   # credential absent or placeholder
    AUTH           = "auth"             # 401/403
    NOT_FOUND      = "not_found"        # 404: bad model or endpoint
    RATE_LIMITED   = "rate_limited"     # 429
    SERVER_ERROR   = "server_error"     # 5xx
    CLIENT_ERROR   = "client_error"     # other 4xx
    TIMEOUT        = "timeout"          # bounded wait exceeded
    NETWORK        = "network"          # transport failure
    EMPTY_PAYLOAD  = "empty_payload"    # 2xx with nothing usable
    UNEXPECTED     = "unexpected"       # anything else


class ProviderUnavailable(Exception):
    """A provider could not produce a usable reply."""

    def __init__(self, provider: str, reason: UnavailableReason, detail: str = ""):
        self.provider = provider
        self.reason = reason
        self.detail = detail
        msg = f"{provider}: {reason.value}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


def _classify_status(code: int) -> UnavailableReason:
    if code in (401, 403):
        return UnavailableReason.AUTH
    if code == 404:
        return UnavailableReason.NOT_FOUND
    if code == 429:
        return UnavailableReason.RATE_LIMITED
    if code >= 500:
        return UnavailableReason.SERVER_ERROR
    return UnavailableReason.CLIENT_ERROR


def classify_provider_error(e: BaseException) -> tuple[UnavailableReason, str]:
    """Classify a provider failure into (reason, message) for logging.

    The message carries the status code or exception type only; response
    bodies are left out since they can echo request headers.
    """
    if isinstance(e, ProviderUnavailable):
        return e.reason, str(e)

    if isinstance(e, ModelHTTPError):
        reason = _classify_status(e.status_code)
        return reason, f"HTTP {e.status_code} from {e.model_name}"

    if isinstance(e, httpx.HTTPStatusError):
        code = e.response.status_code
        return _classify_status(code), f"HTTP {code} from {e.request.url.host}"

    if isinstance(e, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException)):
        return UnavailableReason.TIMEOUT, "Timed out"

    if isinstance(e, httpx.RequestError):
        return UnavailableReason.NETWORK, f"Network error: {type(e).__name__}"

    if isinstance(e, ModelAPIError):
        return UnavailableReason.NETWORK, f"Model API error: {type(e).__name__}"

    return UnavailableReason.UNEXPECTED, f"Unexpected error: {type(e).__name__}"
