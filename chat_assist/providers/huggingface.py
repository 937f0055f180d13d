"""Hugging Face Inference API provider (direct HTTP)."""

import logging
from typing import Any

import httpx

from chat_assist._provider_errors import UnavailableReason, classify_provider_error
from chat_assist.config import Settings
from chat_assist.providers._base import BaseProvider, credential_configured

logger = logging.getLogger(__name__)

HUGGING_FACE_PLACEHOLDER = "YOUR_HUGGING_FACE_TOKEN"

_MIN_REPLY_CHARS = 10

_PARAMETERS: dict[str, Any] = {
    "max_new_tokens": 100,
    "temperature": 0.7,
    "do_sample": True,
    "return_full_text": False,
}


def _extract_generated_text(data: Any) -> str:
    """Pull generated text out of the payload shapes the Inference API returns."""
    text = None
    if isinstance(data, list) and data and isinstance(data[0], dict):
        text = data[0].get("generated_text") or data[0].get("response")
    elif isinstance(data, dict):
        text = data.get("generated_text")
    return text if isinstance(text, str) else ""


class HuggingFaceProvider(BaseProvider):
    """Tries each configured model endpoint in order; first usable reply wins.

    The message is sent raw (these conversational models take no system
    prompt). An echoed copy of the message is stripped from the output and
    replies of 10 characters or fewer are rejected.
    """

    name = "huggingface"

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str,
        models: list[str],
        timeout: float = 8.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.models = list(models)
        self.timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.models) and credential_configured(self.api_key, HUGGING_FACE_PLACEHOLDER)

    async def _generate(self, message: str, system_prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key.strip()}",
        }
        payload = {"inputs": message, "parameters": _PARAMETERS}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for model in self.models:
                try:
                    resp = await client.post(f"{self.base_url}/{model}", headers=headers, json=payload)
                    resp.raise_for_status()
                    data = resp.json()
                except (httpx.HTTPError, ValueError) as e:
                    reason, msg = classify_provider_error(e)
                    logger.info("huggingface model %s failed [%s]: %s", model, reason.value, msg)
                    continue

                text = _extract_generated_text(data)
                if message:
                    text = text.replace(message, "", 1)
                text = text.strip()
                if len(text) > _MIN_REPLY_CHARS:
                    return text
                logger.info("huggingface model %s returned no usable text", model)

        raise self.unavailable(UnavailableReason.EMPTY_PAYLOAD, "no model produced a usable reply")


def huggingface_provider(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None,
) -> HuggingFaceProvider:
    return HuggingFaceProvider(
        api_key=settings.hugging_face_api_key,
        base_url=settings.hugging_face_base_url,
        models=settings.hugging_face_models,
        timeout=settings.provider_timeout,
        transport=transport,
    )
