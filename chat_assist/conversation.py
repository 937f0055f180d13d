"""Conversation model, store contract and transcript export.

Persistence is an injected collaborator: anything satisfying
ConversationStore can back a ChatSession. The in-memory store is what the
CLI uses; it lives for one process.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Protocol, runtime_checkable
from uuid import uuid4

from chat_assist.personalities import PERSONALITIES
from chat_assist.resolver import ResponseResolver

Sender = Literal["user", "ai"]

_TITLE_CHARS = 50


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ChatMessage:
    content: str
    sender: Sender
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: str = field(default_factory=_now)
    personality: str | None = None


@dataclass
class Conversation:
    title: str
    personality: str
    id: str = field(default_factory=lambda: uuid4().hex)
    messages: list[ChatMessage] = field(default_factory=list)
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)


@runtime_checkable
class ConversationStore(Protocol):
    """Storage contract for conversations. Newest conversation first in list()."""

    def create(self, conversation: Conversation) -> Conversation:
        ...

    def get(self, conversation_id: str) -> Conversation | None:
        ...

    def append(self, conversation_id: str, message: ChatMessage) -> Conversation:
        ...

    def list(self) -> list[Conversation]:
        ...

    def delete(self, conversation_id: str) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemoryConversationStore:
    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}

    def create(self, conversation: Conversation) -> Conversation:
        self._conversations[conversation.id] = conversation
        return conversation

    def get(self, conversation_id: str) -> Conversation | None:
        return self._conversations.get(conversation_id)

    def append(self, conversation_id: str, message: ChatMessage) -> Conversation:
        conversation = self._conversations.get(conversation_id)
        if conversation is None:
            raise KeyError(f"Conversation not found: {conversation_id}")
        conversation.messages.append(message)
        conversation.updated_at = message.timestamp
        return conversation

    def list(self) -> list[Conversation]:
        return sorted(self._conversations.values(), key=lambda c: c.created_at, reverse=True)

    def delete(self, conversation_id: str) -> None:
        self._conversations.pop(conversation_id, None)

    def clear(self) -> None:
        self._conversations.clear()


def new_conversation(store: ConversationStore, personality: str, title: str | None = None) -> Conversation:
    """Create and register a conversation titled ``Chat N`` unless a title is given."""
    title = title or f"Chat {len(store.list()) + 1}"
    return store.create(Conversation(title=title, personality=personality))


def export_conversation(conversation: Conversation, format: str = "txt") -> str | None:
    """Render a plain-text transcript. Returns None for unsupported formats."""
    if format != "txt":
        return None

    persona = PERSONALITIES.get(conversation.personality)
    lines = [
        f"Conversation: {conversation.title}",
        f"Created: {_display_time(conversation.created_at)}",
        f"AI Personality: {persona.name if persona else 'Unknown'}",
        "",
    ]
    for message in conversation.messages:
        sender = "You" if message.sender == "user" else "AI Assistant"
        lines.append(f"[{_display_time(message.timestamp)}] {sender}: {message.content}")
        lines.append("")
    return "\n".join(lines) + "\n"


def _display_time(iso: str) -> str:
    try:
        return datetime.fromisoformat(iso).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return iso


class ChatSession:
    """Binds a store, a resolver and the active conversation for one chat."""

    def __init__(
        self,
        resolver: ResponseResolver,
        store: ConversationStore | None = None,
        personality: str = "helpful",
    ):
        self.resolver = resolver
        self.store = store if store is not None else InMemoryConversationStore()
        self.personality = personality
        self.conversation = new_conversation(self.store, personality)
        self.last_provenance: str | None = None

    def switch_personality(self, personality: str) -> None:
        """Change voice for subsequent replies; starts a fresh conversation."""
        self.personality = personality
        self.conversation = new_conversation(self.store, personality)

    def reset(self) -> None:
        self.conversation = new_conversation(self.store, self.personality)

    async def send(self, content: str) -> str:
        """Record the user message, resolve a reply, record and return it."""
        first_turn = not self.conversation.messages
        self.store.append(self.conversation.id, ChatMessage(content=content, sender="user"))

        resolved = await self.resolver.resolve(content, self.personality)
        self.last_provenance = resolved.provenance

        conversation = self.store.append(
            self.conversation.id,
            ChatMessage(content=resolved.text, sender="ai", personality=self.personality),
        )
        if first_turn:
            conversation.title = content[:_TITLE_CHARS] + "..."
        return resolved.text
