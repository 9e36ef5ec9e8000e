"""Request classifier - heuristic code-request detection with LRU cache."""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from uiforge.domain.services.sanitizer import sanitize

# Questions about the assistant itself ("can you...", "what is this", trailing "?")
CAPABILITY_QUESTION_PATTERNS = (
    re.compile(r"^(can|could|do|does|are|is|will|would) (you|this|it|ui forge)"),
    re.compile(r"^what (can|do|does|are|is) (you|this|it)"),
    re.compile(r"^how (do|does|can|could) (you|this|it)"),
    re.compile(r"^tell me (about|what)"),
    re.compile(r"^(who|what) (are|is) (you|this|ui forge)"),
    re.compile(r"\?$"),
)

# Phrasing that turns a question into a request ("can you build me a navbar?")
ACTION_INTENT_PATTERNS = (
    re.compile(r"\b(build|create|generate|make|code|design|convert|turn|implement)\b.*\b(for me|this|a |an |the )"),
    re.compile(r"\b(i need|i want|please|give me|show me)\b"),
)

CODING_ACTION_PATTERNS = (
    re.compile(r"\b(build|create|generate|make|code|design|implement)\s+(me\s+)?(a|an|the|this)?\s*\w+"),
    re.compile(r"\b(convert|turn|transform)\s+.*(to|into)\s*(html|code|tailwind)"),
    re.compile(r"\b(add|change|update|modify|fix|refactor)\s+(the|a|this)?\s*\w+"),
    re.compile(r"\bcode\s+this\b"),
)


@dataclass(frozen=True)
class Classification:
    """Classifier verdict plus the sanitized request threaded into every prompt."""

    sanitized_request: str
    is_code_request: bool

    @property
    def kind(self) -> Literal["code", "conversation"]:
        return "code" if self.is_code_request else "conversation"


@lru_cache(maxsize=256)
def _is_code_text(text: str) -> bool:
    """Decide on lowercased, trimmed text. First matching rule wins."""
    is_capability_question = any(p.search(text) for p in CAPABILITY_QUESTION_PATTERNS)
    has_action_intent = any(p.search(text) for p in ACTION_INTENT_PATTERNS)
    if is_capability_question and not has_action_intent:
        return False

    if any(p.search(text) for p in CODING_ACTION_PATTERNS):
        return True

    # Ambiguous input is not worth a generation run
    return False


def classify_request(request: str, has_image: bool) -> Classification:
    """Sanitize the request and decide whether it needs code generation.

    An attached image is always treated as a design reference.
    """
    sanitized = sanitize(request or "")
    if has_image:
        return Classification(sanitized_request=sanitized, is_code_request=True)
    return Classification(
        sanitized_request=sanitized,
        is_code_request=_is_code_text(sanitized.lower().strip()),
    )
