"""OpenAI-compatible chat completion providers (Groq, OpenAI) via pydantic-ai."""

from openai import AsyncOpenAI
from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from chat_assist._provider_errors import UnavailableReason
from chat_assist.config import Settings
from chat_assist.providers._base import BaseProvider, credential_configured

GROQ_PLACEHOLDER = "YOUR_GROQ_API_KEY"
OPENAI_PLACEHOLDER = "YOUR_OPENAI_API_KEY"

_MODEL_SETTINGS = ModelSettings(max_tokens=200, temperature=0.7)


class OpenAICompatibleProvider(BaseProvider):
    """Single-shot chat completion against an OpenAI-compatible endpoint.

    The underlying client is built with max_retries=0: the resolver makes at
    most one attempt per provider. Pass *model* to substitute a pydantic-ai
    test model for the HTTP-backed one.
    """

    def __init__(
        self,
        name: str,
        *,
        api_key: str | None,
        base_url: str,
        model_name: str,
        placeholder: str,
        timeout: float = 8.0,
        model: Model | None = None,
    ):
        self.name = name
        self.api_key = api_key
        self.base_url = base_url
        self.model_name = model_name
        self.placeholder = placeholder
        self.timeout = timeout
        self._model = model

    def is_configured(self) -> bool:
        return credential_configured(self.api_key, self.placeholder)

    def _build_model(self) -> Model:
        if self._model is not None:
            return self._model
        client = AsyncOpenAI(
            base_url=self.base_url,
            api_key=self.api_key,
            max_retries=0,
            timeout=self.timeout,
        )
        return OpenAIChatModel(self.model_name, provider=OpenAIProvider(openai_client=client))

    async def _generate(self, message: str, system_prompt: str) -> str:
        agent = Agent(self._build_model(), system_prompt=system_prompt)
        result = await agent.run(message, model_settings=_MODEL_SETTINGS)
        output = result.output
        if not isinstance(output, str) or not output.strip():
            raise self.unavailable(UnavailableReason.EMPTY_PAYLOAD)
        return output


def groq_provider(settings: Settings, model: Model | None = None) -> OpenAICompatibleProvider:
    return OpenAICompatibleProvider(
        "groq",
        api_key=settings.groq_api_key,
        base_url=settings.groq_base_url,
        model_name=settings.groq_model,
        placeholder=GROQ_PLACEHOLDER,
        timeout=settings.provider_timeout,
        model=model,
    )


def openai_provider(settings: Settings, model: Model | None = None) -> OpenAICompatibleProvider:
    return OpenAICompatibleProvider(
        "openai",
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model_name=settings.openai_model,
        placeholder=OPENAI_PLACEHOLDER,
        timeout=settings.provider_timeout,
        model=model,
    )
