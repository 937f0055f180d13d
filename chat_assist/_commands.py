"""Slash command registry, handlers, and dispatch for the chat REPL."""

from __future__ import annotations

from collections.abc import Callable, Awaitable
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from chat_assist.conversation import ChatSession, export_conversation
from chat_assist.display import console
from chat_assist.personalities import PERSONALITIES, VALID_PERSONALITIES


# -- Types -----------------------------------------------------------------

@dataclass
class CommandContext:
    """Passed to every slash-command handler."""

    session: ChatSession
    export_dir: Path


@dataclass(frozen=True)
class SlashCommand:
    """A registered slash command."""

    name: str
    description: str
    handler: Callable[[CommandContext, str], Awaitable[None]]


# -- Handlers --------------------------------------------------------------


async def _cmd_help(ctx: CommandContext, args: str) -> None:
    """List available slash commands."""
    from rich.table import Table

    table = Table(title="Slash Commands", border_style="accent", expand=False)
    table.add_column("Command", style="accent")
    table.add_column("Description")
    for cmd in COMMANDS.values():
        table.add_row(f"/{cmd.name}", cmd.description)
    console.print(table)


async def _cmd_clear(ctx: CommandContext, args: str) -> None:
    """Start a new conversation."""
    ctx.session.reset()
    console.print("[info]Started a new conversation.[/info]")


async def _cmd_personality(ctx: CommandContext, args: str) -> None:
    """Show or switch the active personality."""
    name = args.strip().lower()
    if not name:
        persona = PERSONALITIES[ctx.session.personality]
        console.print(f"[info]Personality: {persona.avatar} {persona.name} ({persona.id})[/info]")
        console.print(f"[dim]Available: {', '.join(VALID_PERSONALITIES)}[/dim]")
        return

    if name not in PERSONALITIES:
        console.print(f"[bold red]Unknown personality:[/bold red] {name}")
        console.print(f"[dim]Choose one of: {', '.join(VALID_PERSONALITIES)}[/dim]")
        return

    ctx.session.switch_personality(name)
    persona = PERSONALITIES[name]
    console.print(f"[info]Switched to {persona.avatar} {persona.name}. New conversation started.[/info]")


async def _cmd_export(ctx: CommandContext, args: str) -> None:
    """Write the current conversation transcript to a text file."""
    conversation = ctx.session.conversation
    if not conversation.messages:
        console.print("[dim]Nothing to export — conversation is empty.[/dim]")
        return

    content = export_conversation(conversation, "txt")
    target = Path(args.strip()) if args.strip() else ctx.export_dir / f"chat-{conversation.id[:8]}.txt"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Export failed:[/bold red] {escape(str(e))}")
        return
    console.print(f"[info]Exported {len(conversation.messages)} message(s) to {target}[/info]")


async def _cmd_source(ctx: CommandContext, args: str) -> None:
    """Show which stage produced the last reply."""
    if ctx.session.last_provenance is None:
        console.print("[dim]No replies yet.[/dim]")
        return
    console.print(f"[info]Last reply came from: {ctx.session.last_provenance}[/info]")


# -- Registry --------------------------------------------------------------

COMMANDS: dict[str, SlashCommand] = {
    "help": SlashCommand("help", "List available slash commands", _cmd_help),
    "clear": SlashCommand("clear", "Start a new conversation", _cmd_clear),
    "personality": SlashCommand("personality", "Show or switch personality: /personality <name>", _cmd_personality),
    "export": SlashCommand("export", "Export transcript: /export [path]", _cmd_export),
    "source": SlashCommand("source", "Show which stage produced the last reply", _cmd_source),
}


# -- Dispatch --------------------------------------------------------------


async def dispatch(raw_input: str, ctx: CommandContext) -> bool:
    """Route slash-command input to the appropriate handler.

    Returns True when the input was a slash command (handled or unknown),
    False when it should go to the resolver.
    """
    if not raw_input.startswith("/"):
        return False

    parts = raw_input[1:].split(maxsplit=1)
    name = parts[0].lower() if parts else ""
    args = parts[1] if len(parts) > 1 else ""

    cmd = COMMANDS.get(name)
    if cmd is None:
        console.print(f"[bold red]Unknown command:[/bold red] /{name}")
        console.print("[dim]Type /help to see available commands.[/dim]")
        return True

    await cmd.handler(ctx, args)
    return True
