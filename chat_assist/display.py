"""Themed terminal display — console, semantic styles, display helpers."""

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.theme import Theme

from chat_assist.config import settings
from chat_assist.personalities import Personality

# -- Theme palettes (keyed by theme name) ------------------------------------

_THEMES: dict[str, dict[str, str]] = {
    "dark":  {"status": "yellow",      "info": "cyan", "accent": "bold cyan", "error": "bold red", "success": "green", "warning": "orange3", "hint": "dim"},
    "light": {"status": "dark_orange", "info": "blue", "accent": "bold blue", "error": "bold red", "success": "green", "warning": "orange3", "hint": "dim"},
}

# -- Console (single instance, themed) --------------------------------------

console = Console(theme=Theme(_THEMES.get(settings.theme, _THEMES["light"])))

# -- Indicators ------------------------------------------------------------

PROMPT_CHAR = "❯"
ERROR       = "✖"
INFO        = "◈"

# -- Theme switching -------------------------------------------------------


def set_theme(name: str) -> None:
    """Switch the console theme at runtime (e.g. from --theme flag)."""
    console.push_theme(Theme(_THEMES.get(name, _THEMES["light"])))


# -- Display helpers -------------------------------------------------------


def display_error(message: str, hint: str | None = None) -> None:
    """Red-bordered panel with optional recovery hint."""
    body = f"[bold red]{ERROR} {message}[/bold red]"
    if hint:
        body += f"\n[dim]{hint}[/dim]"
    console.print(Panel(body, border_style="red", title="Error", title_align="left"))


def display_info(message: str) -> None:
    """Themed info message."""
    console.print(f"[info]{INFO} {message}[/info]")


def display_reply(text: str, persona: Personality, provenance: str | None = None) -> None:
    """Reply panel titled with the persona avatar; provenance shown as a dim subtitle."""
    console.print(Panel(
        Markdown(text),
        title=f"{persona.avatar} {persona.name}",
        title_align="left",
        subtitle=f"[hint]via {provenance}[/hint]" if provenance else None,
        subtitle_align="right",
        border_style="accent",
    ))
