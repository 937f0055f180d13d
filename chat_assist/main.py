import asyncio
import logging

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from rich.table import Table

from chat_assist._commands import dispatch as dispatch_command, CommandContext, COMMANDS
from chat_assist.config import settings, DATA_DIR, APP_NAME, VALID_THEMES
from chat_assist.conversation import ChatSession
from chat_assist.display import console, display_error, display_info, display_reply, set_theme, PROMPT_CHAR
from chat_assist.personalities import PERSONALITIES, VALID_PERSONALITIES, resolve_personality
from chat_assist.resolver import ResponseResolver, build_resolver
from chat_assist.status import get_status, get_version, render_status_table
from chat_assist.telemetry import recent_resolutions, setup_tracing

_DB_PATH = DATA_DIR / f"{APP_NAME}.db"

app = typer.Typer(
    help="chat-assist - personality chat replies with provider fallback",
    context_settings={"help_option_names": ["--help", "-h"]},
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log provider attempts to stderr"),
    theme: str = typer.Option(None, "--theme", "-t", help="Color theme: dark or light"),
):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if theme:
        if theme not in VALID_THEMES:
            display_error(f"Unknown theme: {theme}", hint=f"Choose one of: {', '.join(VALID_THEMES)}")
            raise typer.Exit(code=2)
        settings.theme = theme
        set_theme(theme)
    setup_tracing(_DB_PATH, version=get_version())


def _check_personality(name: str | None) -> str:
    name = (name or settings.personality).lower()
    if name not in PERSONALITIES:
        display_error(
            f"Unknown personality: {name}",
            hint=f"Choose one of: {', '.join(VALID_PERSONALITIES)}",
        )
        raise typer.Exit(code=2)
    return name


@app.command()
def ask(
    message: str = typer.Argument(..., help="Message to send"),
    personality: str = typer.Option(None, "--personality", "-p", help="Personality id"),
    local: bool = typer.Option(False, "--local", "-l", help="Skip remote providers"),
    show_source: bool = typer.Option(False, "--show-source", "-s", help="Show which stage replied"),
):
    """Resolve a single reply and print it."""
    name = _check_personality(personality)
    resolver = ResponseResolver([], timeout=settings.provider_timeout) if local else build_resolver(settings)
    resolved = asyncio.run(resolver.resolve(message, name))
    display_reply(resolved.text, resolve_personality(name), resolved.provenance if show_source else None)


async def chat_loop(personality: str):
    chat = ChatSession(build_resolver(settings), personality=personality)
    ctx = CommandContext(session=chat, export_dir=DATA_DIR / "exports")
    completer = WordCompleter(
        [f"/{name}" for name in COMMANDS],
        sentence=True,
    )
    session = PromptSession(
        history=FileHistory(str(DATA_DIR / "history.txt")),
        completer=completer,
        complete_while_typing=False,
    )

    persona = PERSONALITIES[personality]
    display_info(f"Chatting with {persona.avatar} {persona.name}. Type /help for commands, exit to quit.")

    while True:
        try:
            user_input = await session.prompt_async(f"{PROMPT_CHAR} ")
        except (EOFError, KeyboardInterrupt):
            break
        if user_input.lower() in ["exit", "quit", "/exit", "/quit"]:
            break
        if not user_input.strip():
            continue
        if await dispatch_command(user_input, ctx):
            continue

        with console.status("[status]Thinking...[/status]"):
            reply = await chat.send(user_input)
        display_reply(reply, PERSONALITIES[chat.personality])


@app.command()
def chat(
    personality: str = typer.Option(None, "--personality", "-p", help="Personality id"),
):
    """Start an interactive chat session."""
    name = _check_personality(personality)
    try:
        asyncio.run(chat_loop(name))
    except KeyboardInterrupt:
        pass


@app.command()
def status():
    """Show which providers are configured, in priority order."""
    info = get_status(settings)
    console.print(render_status_table(info))


@app.command()
def personalities():
    """List available personalities."""
    table = Table(title="Personalities", border_style="accent", expand=False)
    table.add_column("Id", style="accent")
    table.add_column("Name")
    table.add_column("Description", style="info")
    for persona in PERSONALITIES.values():
        marker = " (default)" if persona.id == settings.personality else ""
        table.add_row(persona.id + marker, f"{persona.avatar} {persona.name}", persona.description)
    console.print(table)


@app.command()
def history(
    last: int = typer.Option(20, "--last", "-n", help="Number of recent resolutions to show"),
):
    """Show which stage produced recent replies (from local traces)."""
    rows = recent_resolutions(_DB_PATH, limit=last)
    if not rows:
        console.print("[yellow]No resolutions recorded yet. Run 'chat-assist ask' first.[/yellow]")
        return

    table = Table(title="Recent resolutions", border_style="accent", expand=False)
    table.add_column("Personality", style="accent")
    table.add_column("Source", style="info")
    table.add_column("Duration", justify="right")
    for row in rows:
        duration = f"{row['duration_ms']:.0f} ms" if row["duration_ms"] is not None else "-"
        table.add_row(row["personality"] or "-", row["provenance"] or "-", duration)
    console.print(table)


if __name__ == "__main__":
    app()
