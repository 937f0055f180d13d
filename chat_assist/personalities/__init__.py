"""Personality registry, templates and voice decoration."""

from chat_assist.personalities._decorate import (
    CREATIVE_SUFFIX_PROBABILITY,
    CREATIVE_SUFFIXES,
    FRIENDLY_PREFIX_PROBABILITY,
    FRIENDLY_PREFIXES,
    decorate,
    pick,
)
from chat_assist.personalities._registry import (
    DEFAULT_PERSONALITY,
    PERSONALITIES,
    VALID_PERSONALITIES,
    Personality,
    UnknownPersonality,
    get_personality,
    resolve_personality,
)

__all__ = [
    "CREATIVE_SUFFIX_PROBABILITY",
    "CREATIVE_SUFFIXES",
    "DEFAULT_PERSONALITY",
    "FRIENDLY_PREFIX_PROBABILITY",
    "FRIENDLY_PREFIXES",
    "PERSONALITIES",
    "VALID_PERSONALITIES",
    "Personality",
    "UnknownPersonality",
    "decorate",
    "get_personality",
    "pick",
    "resolve_personality",
]
