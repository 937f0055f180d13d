"""Remote provider adapters, built in configured priority order."""

from chat_assist.config import Settings
from chat_assist.providers._base import BaseProvider, ProviderAdapter, credential_configured
from chat_assist.providers.huggingface import HuggingFaceProvider, huggingface_provider
from chat_assist.providers.openai_compat import (
    OpenAICompatibleProvider,
    groq_provider,
    openai_provider,
)

_FACTORIES = {
    "groq": groq_provider,
    "openai": openai_provider,
    "huggingface": huggingface_provider,
}


def build_providers(settings: Settings) -> list[ProviderAdapter]:
    """Instantiate the enabled providers in ``settings.providers`` order."""
    return [_FACTORIES[name](settings) for name in settings.providers]


__all__ = [
    "BaseProvider",
    "HuggingFaceProvider",
    "OpenAICompatibleProvider",
    "ProviderAdapter",
    "build_providers",
    "credential_configured",
    "groq_provider",
    "huggingface_provider",
    "openai_provider",
]
