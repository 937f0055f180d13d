"""Functional tests for REPL slash commands.

All tests use a real ChatSession over a local-only resolver — no mocks.
"""

import random

import pytest

from chat_assist._commands import COMMANDS, CommandContext, dispatch
from chat_assist.conversation import ChatSession
from chat_assist.resolver import ResponseResolver


def _make_ctx(tmp_path, personality: str = "helpful") -> CommandContext:
    session = ChatSession(ResponseResolver([], rng=random.Random(0)), personality=personality)
    return CommandContext(session=session, export_dir=tmp_path / "exports")


def test_registry_names():
    assert set(COMMANDS) == {"help", "clear", "personality", "export", "source"}


@pytest.mark.asyncio
async def test_plain_text_not_dispatched(tmp_path):
    assert await dispatch("hello there", _make_ctx(tmp_path)) is False


@pytest.mark.asyncio
async def test_unknown_command_handled(tmp_path, capsys):
    assert await dispatch("/frobnicate", _make_ctx(tmp_path)) is True
    assert "Unknown command" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_help_lists_commands(tmp_path, capsys):
    assert await dispatch("/help", _make_ctx(tmp_path)) is True
    out = capsys.readouterr().out
    for name in COMMANDS:
        assert f"/{name}" in out


@pytest.mark.asyncio
async def test_personality_switch(tmp_path):
    ctx = _make_ctx(tmp_path)
    await dispatch("/personality Creative", ctx)
    assert ctx.session.personality == "creative"
    assert ctx.session.conversation.personality == "creative"


@pytest.mark.asyncio
async def test_personality_unknown_keeps_current(tmp_path, capsys):
    ctx = _make_ctx(tmp_path, personality="technical")
    await dispatch("/personality pirate", ctx)
    assert ctx.session.personality == "technical"
    assert "Unknown personality" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_clear_starts_new_conversation(tmp_path):
    ctx = _make_ctx(tmp_path)
    await ctx.session.send("Hello")
    old = ctx.session.conversation
    await dispatch("/clear", ctx)
    assert ctx.session.conversation is not old
    assert ctx.session.conversation.messages == []


@pytest.mark.asyncio
async def test_export_writes_transcript(tmp_path):
    ctx = _make_ctx(tmp_path, personality="friendly")
    await ctx.session.send("Hello")
    target = tmp_path / "out" / "chat.txt"

    await dispatch(f"/export {target}", ctx)

    content = target.read_text(encoding="utf-8")
    assert content.startswith("Conversation: Hello...\n")
    assert "AI Personality: Friendly Buddy" in content
    assert "You: Hello" in content


@pytest.mark.asyncio
async def test_export_default_location(tmp_path):
    ctx = _make_ctx(tmp_path)
    await ctx.session.send("Hello")
    await dispatch("/export", ctx)
    exported = list((tmp_path / "exports").glob("chat-*.txt"))
    assert len(exported) == 1


@pytest.mark.asyncio
async def test_export_empty_conversation_writes_nothing(tmp_path):
    ctx = _make_ctx(tmp_path)
    await dispatch("/export", ctx)
    assert not (tmp_path / "exports").exists()


@pytest.mark.asyncio
async def test_source_reports_last_stage(tmp_path, capsys):
    ctx = _make_ctx(tmp_path)
    await dispatch("/source", ctx)
    assert "No replies yet" in capsys.readouterr().out

    await ctx.session.send("Hello")
    await dispatch("/source", ctx)
    assert "local" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_export_to_directory_reports_error(tmp_path, capsys):
    ctx = _make_ctx(tmp_path)
    await ctx.session.send("Hello")

    assert await dispatch(f"/export {tmp_path}", ctx) is True

    assert "Export failed" in capsys.readouterr().out
    await ctx.session.send("Still here?")
    assert len(ctx.session.conversation.messages) == 4
