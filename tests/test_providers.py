"""Functional tests for the remote provider adapters.

OpenAI-compatible providers run against pydantic-ai's FunctionModel; the
Hugging Face provider runs against httpx.MockTransport. No network access.
"""

import json

import httpx
import pytest
from pydantic_ai.exceptions import ModelHTTPError
from pydantic_ai.messages import ModelMessage, ModelRequest, ModelResponse, SystemPromptPart, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from chat_assist.config import Settings
from chat_assist.providers import (
    HuggingFaceProvider,
    OpenAICompatibleProvider,
    build_providers,
    credential_configured,
    groq_provider,
    huggingface_provider,
    openai_provider,
)
from chat_assist.providers.huggingface import HUGGING_FACE_PLACEHOLDER
from chat_assist.providers.openai_compat import GROQ_PLACEHOLDER


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "GROQ_API_KEY", "OPENAI_API_KEY", "HUGGING_FACE_API_KEY",
        "HUGGING_FACE_MODELS", "CHAT_ASSIST_PROVIDERS", "CHAT_ASSIST_PROVIDER_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(("value", "expected"), [
    (None, False),
    ("", False),
    ("   ", False),
    (GROQ_PLACEHOLDER, False),
    (f"  {GROQ_PLACEHOLDER} ", False),
    ("gsk-real", True),
])
def test_credential_configured(value, expected):
    assert credential_configured(value, GROQ_PLACEHOLDER) is expected


def test_build_providers_default_order():
    providers = build_providers(Settings())
    assert [p.name for p in providers] == ["groq", "openai", "huggingface"]
    assert not any(p.is_configured() for p in providers)


def test_factories_read_settings():
    settings = Settings(groq_api_key="gsk-1", openai_api_key="sk-1", openai_model="gpt-4o")
    assert groq_provider(settings).is_configured()
    openai = openai_provider(settings)
    assert openai.is_configured()
    assert openai.model_name == "gpt-4o"
    assert not huggingface_provider(settings).is_configured()


# ---------------------------------------------------------------------------
# OpenAI-compatible providers
# ---------------------------------------------------------------------------


def _provider(function, api_key="gsk-test") -> OpenAICompatibleProvider:
    return OpenAICompatibleProvider(
        "groq",
        api_key=api_key,
        base_url="https://api.groq.com/openai/v1",
        model_name="llama-3.1-8b-instant",
        placeholder=GROQ_PLACEHOLDER,
        model=FunctionModel(function),
    )


@pytest.mark.asyncio
async def test_openai_compatible_success():
    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        return ModelResponse(parts=[TextPart("  Paris is the capital of France.  ")])

    text = await _provider(reply).try_generate("Capital of France?", "Be brief.")
    assert text == "Paris is the capital of France."


@pytest.mark.asyncio
async def test_openai_compatible_sends_system_prompt_and_message():
    seen: dict = {}

    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        request = messages[0]
        assert isinstance(request, ModelRequest)
        seen["system"] = [p.content for p in request.parts if isinstance(p, SystemPromptPart)]
        seen["user"] = [p.content for p in request.parts if p.part_kind == "user-prompt"]
        return ModelResponse(parts=[TextPart("ok, noted.")])

    await _provider(reply).try_generate("Hello there", "You are a pirate.")
    assert seen["system"] == ["You are a pirate."]
    assert seen["user"] == ["Hello there"]


@pytest.mark.asyncio
async def test_openai_compatible_http_error_is_unavailable():
    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        raise ModelHTTPError(401, "test-model", body="Unauthorized")

    assert await _provider(reply).try_generate("Hi", "Be brief.") is None


@pytest.mark.asyncio
async def test_openai_compatible_unconfigured_makes_no_call():
    calls = []

    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        calls.append(messages)
        return ModelResponse(parts=[TextPart("should not happen")])

    provider = _provider(reply, api_key=GROQ_PLACEHOLDER)
    assert not provider.is_configured()
    assert await provider.try_generate("Hi", "Be brief.") is None
    assert calls == []


# ---------------------------------------------------------------------------
# Hugging Face provider
# ---------------------------------------------------------------------------


def _hf(handler, models=("org/model-a", "org/model-b"), api_key="hf_test") -> HuggingFaceProvider:
    return HuggingFaceProvider(
        api_key=api_key,
        base_url="https://api-inference.huggingface.co/models/",
        models=list(models),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_hf_success_strips_echo():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"generated_text": "How are you? I am doing well, thanks!"}])

    text = await _hf(handler).try_generate("How are you?", "ignored system prompt")

    assert text == "I am doing well, thanks!"
    assert len(requests) == 1
    request = requests[0]
    assert str(request.url) == "https://api-inference.huggingface.co/models/org/model-a"
    assert request.headers["Authorization"] == "Bearer hf_test"
    body = json.loads(request.content)
    assert body["inputs"] == "How are you?"
    assert body["parameters"]["max_new_tokens"] == 100
    assert body["parameters"]["return_full_text"] is False


@pytest.mark.asyncio
async def test_hf_falls_through_to_next_model():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("model-a"):
            return httpx.Response(503, json={"error": "Model is loading"})
        return httpx.Response(200, json={"generated_text": "Second model answered here."})

    assert await _hf(handler).try_generate("Hi", "") == "Second model answered here."


@pytest.mark.asyncio
async def test_hf_accepts_response_field():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"response": "An answer under the response key."}])

    assert await _hf(handler).try_generate("Hi", "") == "An answer under the response key."


@pytest.mark.asyncio
async def test_hf_short_replies_rejected():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"generated_text": "Hi Ok."}])

    assert await _hf(handler).try_generate("Hi", "") is None


@pytest.mark.asyncio
async def test_hf_malformed_json_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    assert await _hf(handler).try_generate("Hi", "") is None


@pytest.mark.asyncio
async def test_hf_network_error_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert await _hf(handler).try_generate("Hi", "") is None


@pytest.mark.asyncio
async def test_hf_unconfigured_makes_no_request():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"generated_text": "unreachable reply text"}])

    assert await _hf(handler, api_key=HUGGING_FACE_PLACEHOLDER).try_generate("Hi", "") is None
    assert await _hf(handler, models=()).try_generate("Hi", "") is None
    assert requests == []


@pytest.mark.asyncio
async def test_hf_garbled_payload_moves_to_next_model():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("model-a"):
            return httpx.Response(200, json=[{"generated_text": {"tokens": [1, 2, 3]}}])
        return httpx.Response(200, json=[{"generated_text": "The second model gave a real answer."}])

    assert await _hf(handler).try_generate("Hi", "") == "The second model gave a real answer."
    assert len(requests) == 2
