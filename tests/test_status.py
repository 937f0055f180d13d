"""Functional tests for provider status reporting."""

from chat_assist.config import Settings
from chat_assist.display import console
from chat_assist.status import get_status, get_version, render_status_table


def _clean(monkeypatch):
    for var in ("GROQ_API_KEY", "OPENAI_API_KEY", "HUGGING_FACE_API_KEY", "CHAT_ASSIST_PROVIDERS"):
        monkeypatch.delenv(var, raising=False)


def test_get_version_reads_pyproject():
    assert get_version() == "0.1.0"


def test_status_reflects_credentials_and_order(monkeypatch):
    _clean(monkeypatch)
    settings = Settings(
        providers=["openai", "groq", "huggingface"],
        openai_api_key="sk-live",
        groq_api_key="YOUR_GROQ_API_KEY",
        personality="technical",
    )
    info = get_status(settings)

    assert info.providers == [("openai", True), ("groq", False), ("huggingface", False)]
    assert info.local is True
    assert info.personality == "technical"


def test_render_status_table(monkeypatch):
    _clean(monkeypatch)
    info = get_status(Settings(groq_api_key="gsk-live", provider_timeout=5))
    with console.capture() as capture:
        console.print(render_status_table(info))
    text = capture.get()

    assert "Not Configured" in text
    assert "priority 1, timeout 5s" in text
    assert "terminal fallback" in text
    assert text.index("groq") < text.index("openai") < text.index("huggingface") < text.index("local")
