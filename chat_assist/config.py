import os
import json
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

APP_NAME = "chat-assist"

# Provider priority, highest first. Local responder always runs last and is not listed.
DEFAULT_PROVIDER_ORDER: list[str] = ["groq", "openai", "huggingface"]

VALID_THEMES: list[str] = ["dark", "light"]

# Hugging Face Inference models tried in order by the huggingface provider.
_DEFAULT_HF_MODELS: list[str] = [
    "microsoft/DialoGPT-large",
    "facebook/blenderbot-400M-distill",
]

# XDG Paths - Explicit XDG resolution so ~/.config/ is used even on macOS
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
DATA_DIR = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share")) / APP_NAME
SETTINGS_FILE = CONFIG_DIR / "settings.json"


def _ensure_dirs() -> None:
    """Create config and data directories (idempotent)."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    DATA_DIR.mkdir(parents=True, exist_ok=True)


class Settings(BaseModel):
    # Provider credentials
    groq_api_key: Optional[str] = Field(default=None)
    openai_api_key: Optional[str] = Field(default=None)
    hugging_face_api_key: Optional[str] = Field(default=None)

    # Provider endpoints and models
    groq_base_url: str = Field(default="https://api.groq.com/openai/v1")
    groq_model: str = Field(default="llama-3.1-8b-instant")
    openai_base_url: str = Field(default="https://api.openai.com/v1")
    openai_model: str = Field(default="gpt-4o-mini")
    hugging_face_base_url: str = Field(default="https://api-inference.huggingface.co/models")
    hugging_face_models: list[str] = Field(default=_DEFAULT_HF_MODELS)

    # Resolution pipeline
    providers: list[str] = Field(default=DEFAULT_PROVIDER_ORDER)
    provider_timeout: float = Field(default=8.0, gt=0, le=60)
    local_simulated_latency: bool = Field(default=False)

    # Behavior
    personality: str = Field(default="helpful")
    theme: str = Field(default="light")

    @field_validator("providers", "hugging_face_models", mode="before")
    @classmethod
    def _parse_csv(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("providers")
    @classmethod
    def _validate_providers(cls, v: list[str]) -> list[str]:
        names = [s.lower() for s in v]
        unknown = [s for s in names if s not in DEFAULT_PROVIDER_ORDER]
        if unknown:
            raise ValueError(f"providers must be drawn from {DEFAULT_PROVIDER_ORDER}, got: {unknown}")
        # One attempt per provider: repeats keep their first position.
        return list(dict.fromkeys(names))

    @field_validator("theme")
    @classmethod
    def _validate_theme(cls, v: str) -> str:
        if v not in VALID_THEMES:
            raise ValueError(f"theme must be one of {VALID_THEMES}, got: {v}")
        return v

    @field_validator("personality")
    @classmethod
    def _validate_personality(cls, v: str) -> str:
        from chat_assist.personalities import VALID_PERSONALITIES

        if v not in VALID_PERSONALITIES:
            raise ValueError(f"personality must be one of {VALID_PERSONALITIES}, got: {v}")
        return v

    @model_validator(mode='before')
    @classmethod
    def fill_from_env(cls, data: dict) -> dict:
        """Env vars override all file-based values (highest precedence layer)."""
        env_map = {
            "groq_api_key": "GROQ_API_KEY",
            "openai_api_key": "OPENAI_API_KEY",
            "hugging_face_api_key": "HUGGING_FACE_API_KEY",
            "groq_model": "GROQ_MODEL",
            "openai_model": "OPENAI_MODEL",
            "hugging_face_models": "HUGGING_FACE_MODELS",
            "providers": "CHAT_ASSIST_PROVIDERS",
            "provider_timeout": "CHAT_ASSIST_PROVIDER_TIMEOUT",
            "local_simulated_latency": "CHAT_ASSIST_SIMULATED_LATENCY",
            "personality": "CHAT_ASSIST_PERSONALITY",
            "theme": "CHAT_ASSIST_THEME",
        }

        for field, env_var in env_map.items():
            val = os.getenv(env_var)
            if val:
                data[field] = val
        return data


def find_project_config() -> Path | None:
    """Return .chat-assist/settings.json in cwd if it exists, else None."""
    candidate = Path.cwd() / ".chat-assist" / "settings.json"
    return candidate if candidate.is_file() else None


def load_config() -> Settings:
    data: dict = {}

    # Layer 1: User config (~/.config/chat-assist/settings.json)
    if SETTINGS_FILE.exists():
        with open(SETTINGS_FILE, "r") as f:
            try:
                data = json.load(f)
            except Exception as e:
                print(f"Error loading settings.json: {e}. Using defaults.")

    # Layer 2: Project config (<cwd>/.chat-assist/settings.json), shallow merge
    project_config = find_project_config()
    if project_config is not None:
        with open(project_config, "r") as f:
            try:
                data |= json.load(f)
            except Exception as e:
                print(f"Error loading project config {project_config}: {e}. Skipping.")

    # Layer 3: Env vars (handled by fill_from_env model_validator)
    return Settings.model_validate(data)


# Lazy settings singleton: directories created on first access, not at import time.
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the global Settings instance, creating it on first call."""
    global _settings
    if _settings is None:
        _ensure_dirs()
        _settings = load_config()
    return _settings


def __getattr__(name: str):
    """Lazy module attribute — ``from chat_assist.config import settings`` works without import-time side effects."""
    if name == "settings":
        return get_settings()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
