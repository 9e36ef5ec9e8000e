"""Prompt-injection redaction for user input."""

import re

FILTERED_TOKEN = "[FILTERED]"
MAX_INPUT_CHARS = 2000

# Applied in order; each runs over the output of the previous one.
INJECTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Instruction override
    re.compile(
        r"\b(?:ignore|disregard|forget|skip|bypass)\s+"
        r"(?:(?:all|previous|above|prior|the|your|system)\s+)*instructions?\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:don'?t|do\s+not|stop)\s+follow(?:ing)?\s+(?:(?:the|your)\s+)?instructions?\b", re.IGNORECASE),
    # Identity hijack
    re.compile(r"\byou\s+are\s+now\b", re.IGNORECASE),
    re.compile(r"\bpretend\s+(?:to\s+be|you'?re)\b", re.IGNORECASE),
    re.compile(r"\bact\s+as\b", re.IGNORECASE),
    re.compile(r"\broleplay\s+as\b", re.IGNORECASE),
    re.compile(r"\bfrom\s+now\s+on\b", re.IGNORECASE),
    # System prompt override / exfiltration
    re.compile(r"\bnew\s+(?:system\s+)?instructions?\s*:", re.IGNORECASE),
    re.compile(r"\boverride\s+(?:system|instructions?|rules)\b", re.IGNORECASE),
    re.compile(r"\bsystem\s+prompt\s*:", re.IGNORECASE),
    re.compile(r"\b(?:reveal|show)\s+(?:(?:your|the)\s+)?(?:(?:system|initial)\s+)?prompt\b", re.IGNORECASE),
    re.compile(
        r"\bwhat(?:'s|\s+is|\s+are)\s+your\s+(?:(?:system|initial)\s+)?instructions?\b",
        re.IGNORECASE,
    ),
    # Delimiter / token injection
    re.compile(r"\[SYSTEM\]|\[/?INST\]|<<SYS>>", re.IGNORECASE),
    re.compile(r"\{\{.*?\}\}"),
    re.compile(r"<\|.*?\|>"),
    # Named jailbreak triggers
    re.compile(r"\bDAN\s+mode\b", re.IGNORECASE),
    re.compile(r"\bjailbreak\b", re.IGNORECASE),
    re.compile(r"\bdeveloper\s+mode\b", re.IGNORECASE),
)


def _redact(text: str) -> str:
    """Apply all patterns until nothing matches.

    A redaction can expose a new word boundary next to an earlier pattern, so
    one ordered pass is repeated until stable. Every productive pass consumes
    input characters, so this terminates.
    """
    while True:
        redacted = text
        for pattern in INJECTION_PATTERNS:
            redacted = pattern.sub(FILTERED_TOKEN, redacted)
        if redacted == text:
            return redacted
        text = redacted


def sanitize(text: str) -> str:
    """Redact known injection phrasing with [FILTERED], then truncate to MAX_INPUT_CHARS.

    Benign input under the limit is returned unchanged. sanitize(sanitize(s)) == sanitize(s).
    """
    if not text:
        return ""
    result = _redact(text)[:MAX_INPUT_CHARS]
    # Cutting at the limit can complete a trailing word boundary.
    while (settled := _redact(result)) != result:
        result = settled[:MAX_INPUT_CHARS]
    return result
