"""Offline pattern-based responder — the terminal stage of the pipeline.

Combines intent classification, the knowledge base and personality templates
into a reply without any network access. generate() never raises and never
returns an empty string.
"""

import asyncio
import logging
import random
import re

from chat_assist import knowledge
from chat_assist._intent import Intent, classify
from chat_assist.personalities import Personality, decorate, pick, resolve_personality

logger = logging.getLogger(__name__)

KEYWORD_PLACEHOLDER = "your topic"

_STOPWORDS = frozenset({
    "this", "that", "with", "have", "will", "what", "how", "can", "could",
    "would", "should", "the", "and", "or", "but", "for", "from", "about",
})

_MAIN_TOPIC_RES = (
    re.compile(r"what\s+(?:is|are)\s+([^?]+)", re.IGNORECASE),
    re.compile(r"explain\s+([^?]+)", re.IGNORECASE),
)

# Intent -> template category.
_CATEGORY = {
    Intent.GREETING: "greetings",
    Intent.CODING:   "coding",
    Intent.CREATIVE: "creative",
    Intent.HELP:     "questions",
    Intent.QUESTION: "questions",
    Intent.WHAT_IS:  "questions",
    Intent.HOW_TO:   "questions",
    Intent.DEFAULT:  "default",
}

_CODING_SKELETONS = (
    "Based on your question about {keywords}, the key approach would be to break this down into smaller steps.",
    "For {keywords}, start with a clean, modular approach: define your requirements, pick the right tools, implement incrementally and test as you go.",
    "Problems like {keywords} usually come down to understanding the underlying concepts and then applying the right patterns.",
)

_HOW_TO_SKELETONS = (
    "When it comes to {keywords}, start with the fundamentals, break it into manageable parts and practice with simple examples first.",
    "Getting there with {keywords} is definitely achievable: set a clear goal, learn the best practices, then build up gradually.",
    "For {keywords}, understanding the 'why' behind each step is just as important as the 'how'.",
)

_WHAT_IS_SKELETONS = (
    "{topic} is a fascinating topic: it's worth looking at its core purpose, how it relates to similar ideas, and when you'd use it.",
    "{topic} can seem confusing at first, but it's quite logical once you understand the fundamentals.",
    "Think of {topic} as a tool or idea that evolved to solve real-world problems more efficiently than what came before.",
)

_CREATIVE_SKELETONS = (
    "For {keywords}, start with what excites you most and let that passion guide the development.",
    "{keywords} has so much potential; let your imagination run wild before you start refining.",
    "With {keywords}, begin from the emotional core and build outward with details that support it.",
)

_QUESTION_SKELETONS = (
    "When thinking about {keywords}, consider the context, different perspectives and the practical implications.",
    "Your question about {keywords} touches on several concepts that are worth exploring.",
    "There are several ways to approach {keywords}, depending on what you're trying to achieve.",
)

_CREATIVE_SPARKS = (
    "Let your imagination soar! Picture a world where colors have emotions and dreams take physical form.",
    "Creativity flows like a river of possibilities. What if we combined unexpected elements to create something entirely new?",
    "In the realm of creation, there are no limits. Let's blend art, technology, and pure imagination!",
    "Every creative journey starts with a single spark. Let's fan that flame into something magnificent!",
)

_HELP_SENTENCE = "I'm here to assist you with any questions or tasks you might have!"


def extract_keywords(text: str, limit: int = 3) -> str:
    """Return up to *limit* salient words joined by ", ", or the placeholder."""
    words = (text or "").lower().split()
    important = [w for w in words if len(w) > 3 and w not in _STOPWORDS]
    return ", ".join(important[:limit]) or KEYWORD_PLACEHOLDER


def extract_main_topic(text: str) -> str | None:
    """Return the subject of a "what is X" / "explain X" message, original casing kept."""
    for pattern in _MAIN_TOPIC_RES:
        match = pattern.search(text or "")
        if match:
            topic = match.group(1).strip()
            if topic:
                return topic
    return None


class LocalResponder:
    """Synthesizes personality-voiced replies from templates.

    The random source is injectable so tests can seed it.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def generate(self, message: str, personality_id: str) -> str:
        persona = resolve_personality(personality_id)
        message = message or ""
        classification = classify(message, persona.id)
        intent = classification.intent

        template = pick(persona.templates_for(_CATEGORY[intent]), self.rng)
        parts = [template, *self._body(intent, message, persona, classification.knowledge)]
        composed = " ".join(p for p in parts if p)

        reply = decorate(composed, persona.id, self.rng)
        if not reply:
            reply = persona.templates["default"][0]
        logger.debug("Local reply for intent=%s personality=%s", intent.value, persona.id)
        return reply

    def _body(
        self, intent: Intent, message: str, persona: Personality, entry: str | None,
    ) -> list[str]:
        rng = self.rng
        keywords = extract_keywords(message)

        if intent is Intent.GREETING:
            return []
        if intent is Intent.CODING:
            return [
                pick(_CODING_SKELETONS, rng).format(keywords=keywords),
                pick(persona.coding_tips, rng),
                knowledge.lookup(message),
            ]
        if intent is Intent.HOW_TO:
            return [pick(_HOW_TO_SKELETONS, rng).format(keywords=keywords)]
        if intent is Intent.WHAT_IS:
            topic = extract_main_topic(message) or keywords
            return [pick(_WHAT_IS_SKELETONS, rng).format(topic=topic)]
        if intent is Intent.CREATIVE:
            return [
                pick(_CREATIVE_SPARKS, rng),
                pick(_CREATIVE_SKELETONS, rng).format(keywords=keywords),
            ]
        if intent is Intent.HELP:
            return [_HELP_SENTENCE]
        if intent is Intent.QUESTION:
            if entry:
                return [entry]
            return [
                pick(_QUESTION_SKELETONS, rng).format(keywords=keywords),
                pick(persona.closings, rng),
            ]
        return [pick(persona.closings, rng)]


async def thinking_delay(rng: random.Random, low: float = 0.8, high: float = 2.0) -> None:
    """Sleep a human-looking 'thinking' delay before a local reply."""
    await asyncio.sleep(rng.uniform(low, high))
