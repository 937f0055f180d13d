"""Personality voice post-processing shared by every pipeline stage."""

import random
import re
from typing import Sequence, TypeVar

T = TypeVar("T")

FRIENDLY_PREFIX_PROBABILITY = 0.3
CREATIVE_SUFFIX_PROBABILITY = 0.2

FRIENDLY_PREFIXES: tuple[str, ...] = ("😊 ", "👍 ", "✨ ")
CREATIVE_SUFFIXES: tuple[str, ...] = (" 🎨", " ✨", " 🌟")

_ROLE_LABEL_RE = re.compile(r"^(AI:|Assistant:|Bot:)", re.IGNORECASE)


def pick(items: Sequence[T], rng: random.Random) -> T:
    """Uniform choice driven by the injected random source."""
    return items[int(rng.random() * len(items))]


def decorate(text: str, personality_id: str, rng: random.Random) -> str:
    """Strip role labels and apply the personality's probabilistic emoji touch.

    friendly prefixes ~30% of replies, creative suffixes ~20%; other
    personalities pass through unchanged.
    """
    result = _ROLE_LABEL_RE.sub("", text.strip()).strip()
    if not result:
        return result

    if personality_id == "friendly":
        if rng.random() > 1 - FRIENDLY_PREFIX_PROBABILITY:
            result = pick(FRIENDLY_PREFIXES, rng) + result
    elif personality_id == "creative":
        if rng.random() > 1 - CREATIVE_SUFFIX_PROBABILITY:
            result += pick(CREATIVE_SUFFIXES, rng)
    return result
