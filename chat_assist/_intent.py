"""Rule-based intent classification for the local responder.

Rules run in fixed precedence and short-circuit on the first match:
greeting, coding, creative (creative personality only), help,
knowledge-base hit, interrogative question, default.
"""

import enum
import re
from dataclasses import dataclass

from chat_assist import knowledge


class Intent(enum.Enum):
    GREETING = "greeting"
    CODING   = "coding"
    HOW_TO   = "how_to"
    WHAT_IS  = "what_is"
    CREATIVE = "creative"
    HELP     = "help"
    QUESTION = "question"
    DEFAULT  = "default"


@dataclass(frozen=True)
class Classification:
    intent: Intent
    knowledge: str | None = None  # set only for knowledge-base hits


GREETING_PATTERNS = (
    re.compile(r"^(hi|hello|hey|good morning|good afternoon|good evening)"),
    re.compile(r"^(what's up|how are you|how's it going)"),
)

CODING_PATTERNS = (
    re.compile(r"(code|programming|javascript|python|react|css|html|function|algorithm|debug|error)"),
    re.compile(r"(how to code|write a function|create a|build a)"),
)

CREATIVE_PATTERNS = (
    re.compile(r"(story|poem|creative|write|design|art|music|color|imagine)"),
    re.compile(r"(create something|be creative|make something)"),
)

HELP_PATTERNS = (
    re.compile(r"(help|support|assistance|guide|tutorial|explain|teach)"),
)

QUESTION_PATTERNS = (
    re.compile(r"^(what|how|why|when|where|who|which|can you|could you|do you|are you|will you)"),
    re.compile(r"\?$"),
)

_WHAT_IS_RE = re.compile(r"^what (is|are)\b")
_HOW_TO_RE = re.compile(r"^how (to|do|can)\b")


def _matches(patterns, text: str) -> bool:
    return any(p.search(text) for p in patterns)


def classify(message: str, personality: str = "helpful") -> Classification:
    """Classify *message* into an Intent. Pure; never raises."""
    text = (message or "").strip().lower()
    if not text:
        return Classification(Intent.DEFAULT)

    if _matches(GREETING_PATTERNS, text):
        return Classification(Intent.GREETING)
    if _matches(CODING_PATTERNS, text):
        return Classification(Intent.CODING)
    # Creative prompts only route to creative templates for the creative persona.
    if personality == "creative" and _matches(CREATIVE_PATTERNS, text):
        return Classification(Intent.CREATIVE)
    if _matches(HELP_PATTERNS, text):
        return Classification(Intent.HELP)

    entry = knowledge.lookup(text)
    if entry is not None:
        return Classification(Intent.QUESTION, knowledge=entry)

    if _matches(QUESTION_PATTERNS, text):
        if _WHAT_IS_RE.match(text):
            return Classification(Intent.WHAT_IS)
        if _HOW_TO_RE.match(text):
            return Classification(Intent.HOW_TO)
        return Classification(Intent.QUESTION)

    return Classification(Intent.DEFAULT)


def classify_intent(message: str, personality: str = "helpful") -> Intent:
    """Shorthand for ``classify(...).intent``."""
    return classify(message, personality).intent
