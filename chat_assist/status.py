"""Provider health checks and status table rendering."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from rich.table import Table

from chat_assist.config import Settings
from chat_assist.providers import build_providers


_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@dataclass
class StatusInfo:
    version: str
    providers: list[tuple[str, bool]]  # [(name, configured), ...] in priority order
    local: bool  # local responder, always available
    provider_timeout: float
    personality: str


def get_version() -> str:
    try:
        return tomllib.loads(_PYPROJECT.read_text())["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "0.0.0"


def get_status(settings: Settings) -> StatusInfo:
    """Gather which providers are configured (no network calls)."""
    return StatusInfo(
        version=get_version(),
        providers=[(p.name, p.is_configured()) for p in build_providers(settings)],
        local=True,
        provider_timeout=settings.provider_timeout,
        personality=settings.personality,
    )


def render_status_table(info: StatusInfo) -> Table:
    """Build a Rich Table from StatusInfo using semantic styles."""
    table = Table(title=f"chat-assist {info.version} (personality: {info.personality})")
    table.add_column("Stage", style="accent")
    table.add_column("Status", style="info")
    table.add_column("Details", style="success")

    for position, (name, configured) in enumerate(info.providers, 1):
        status = "Configured" if configured else "Not Configured"
        details = f"priority {position}, timeout {info.provider_timeout:g}s"
        table.add_row(name, status, details)
    table.add_row("local", "Available" if info.local else "Unavailable", "terminal fallback")

    return table
