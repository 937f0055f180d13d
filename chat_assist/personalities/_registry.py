"""Personality registry.

Each personality carries display metadata, the system prompt sent to remote
providers, and the template bundle used by the local responder. The table is
built once at import and never mutated.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from chat_assist.personalities._templates import CLOSINGS, CODING_TIPS, TEMPLATES

logger = logging.getLogger(__name__)

DEFAULT_PERSONALITY = "helpful"


class UnknownPersonality(KeyError):
    """Raised by get_personality() for ids outside the registry."""

    def __init__(self, personality_id: object):
        self.personality_id = personality_id
        super().__init__(f"Unknown personality: {personality_id!r}")


@dataclass(frozen=True)
class Personality:
    id: str
    name: str
    description: str
    avatar: str
    system_prompt: str
    templates: Mapping[str, tuple[str, ...]] = field(repr=False)
    closings: tuple[str, ...] = field(repr=False)
    coding_tips: tuple[str, ...] = field(repr=False)

    def templates_for(self, category: str) -> tuple[str, ...]:
        """Templates for *category*, or the default list when the persona has none."""
        return self.templates.get(category) or self.templates["default"]


def _build(
    id: str, *, name: str, description: str, avatar: str, system_prompt: str,
) -> Personality:
    return Personality(
        id=id,
        name=name,
        description=description,
        avatar=avatar,
        system_prompt=system_prompt,
        templates=MappingProxyType(TEMPLATES[id]),
        closings=CLOSINGS[id],
        coding_tips=CODING_TIPS[id],
    )


PERSONALITIES: Mapping[str, Personality] = MappingProxyType({
    "helpful": _build(
        "helpful",
        name="Helpful Assistant",
        description="Professional and informative",
        avatar="🤖",
        system_prompt=(
            "You are a helpful, professional AI assistant. "
            "Provide clear, accurate, and useful responses."
        ),
    ),
    "creative": _build(
        "creative",
        name="Creative Genius",
        description="Imaginative and artistic",
        avatar="🎨",
        system_prompt=(
            "You are a creative AI assistant who thinks outside the box. "
            "Be imaginative, artistic, and inspire creativity in your responses."
        ),
    ),
    "technical": _build(
        "technical",
        name="Tech Expert",
        description="Programming and technology focused",
        avatar="💻",
        system_prompt=(
            "You are a technical AI assistant specialized in programming, technology, "
            "and development. Provide detailed technical explanations and code examples "
            "when appropriate."
        ),
    ),
    "friendly": _build(
        "friendly",
        name="Friendly Buddy",
        description="Casual and conversational",
        avatar="😊",
        system_prompt=(
            "You are a friendly, casual AI companion. Be warm, conversational, and "
            "engaging. Use a casual tone and show genuine interest in helping."
        ),
    ),
})

VALID_PERSONALITIES: list[str] = list(PERSONALITIES.keys())


def get_personality(personality_id: str) -> Personality:
    """Look up a personality by id.

    Raises:
        UnknownPersonality: If the id is not registered.
    """
    try:
        return PERSONALITIES[personality_id]
    except (KeyError, TypeError):
        raise UnknownPersonality(personality_id) from None


def resolve_personality(personality_id: str | None) -> Personality:
    """Like get_personality(), but unknown ids resolve to the default persona."""
    try:
        return get_personality(personality_id)
    except UnknownPersonality:
        logger.debug("Unknown personality %r, using %r", personality_id, DEFAULT_PERSONALITY)
        return PERSONALITIES[DEFAULT_PERSONALITY]
