"""Provider adapter contract shared by every remote stage."""

import logging
from typing import Protocol, runtime_checkable

from chat_assist._provider_errors import (
    ProviderUnavailable,
    UnavailableReason,
    classify_provider_error,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class ProviderAdapter(Protocol):
    """One remote text-generation stage in the resolution chain.

    try_generate() returns the reply text, or None when the provider is
    unavailable for any reason. It must not raise.
    """

    name: str

    def is_configured(self) -> bool:
        ...

    async def try_generate(self, message: str, system_prompt: str) -> str | None:
        ...


def credential_configured(value: str | None, placeholder: str) -> bool:
    """A credential counts only when present, non-blank and not the placeholder."""
    if value is None:
        return False
    value = value.strip()
    return bool(value) and value != placeholder


class BaseProvider:
    """Implements try_generate() on top of a raising _generate().

    Subclasses raise ProviderUnavailable (or let library errors escape);
    everything is caught here and logged with a classified reason.
    """

    name: str = "provider"

    def is_configured(self) -> bool:
        raise NotImplementedError

    async def _generate(self, message: str, system_prompt: str) -> str:
        raise NotImplementedError

    async def try_generate(self, message: str, system_prompt: str) -> str | None:
        if not self.is_configured():
            logger.info("%s skipped: not configured", self.name)
            return None
        try:
            text = await self._generate(message, system_prompt)
        except Exception as e:
            reason, msg = classify_provider_error(e)
            logger.warning("%s unavailable [%s]: %s", self.name, reason.value, msg)
            return None
        if not text or not text.strip():
            logger.warning("%s unavailable [%s]", self.name, UnavailableReason.EMPTY_PAYLOAD.value)
            return None
        return text.strip()

    def unavailable(self, reason: UnavailableReason, detail: str = "") -> ProviderUnavailable:
        return ProviderUnavailable(self.name, reason, detail)
