"""Best-effort cleanup of model output into a bare HTML document.

Each transform is a pure string function; ``has_doctype`` is the acceptance
check callers use to decide between cleaned output and a fallback.
"""

import re

DOCTYPE = "<!doctype"

# Any language tag: ```html, ```HTML5, ```jsx, bare ```
_FENCE_RE = re.compile(r"```[\w-]*\n?")

# Stops at the first '<' so a declaration on the same line survives
_NARRATIVE_RE = re.compile(
    r"^\s*(?:"
    r"here(?:'s| is)"
    r"|below is"
    r"|the (?:fixed|corrected|updated|enhanced|improved)"
    r"|i(?:'ve| have) (?:fixed|corrected|updated|enhanced|improved)"
    r")\b[^\n<]*\n?",
    re.IGNORECASE,
)


def strip_code_fences(text: str) -> str:
    """Remove markdown fences, whatever their language tag."""
    return _FENCE_RE.sub("", text)


def strip_leading_narrative(text: str) -> str:
    """Drop leading prose such as 'Here is the fixed code:' up to the end of line or the first tag."""
    while True:
        stripped = _NARRATIVE_RE.sub("", text, count=1)
        if stripped == text:
            return text
        text = stripped


def relocate_to_doctype(text: str) -> str:
    """Discard any preamble before the first document type declaration.

    Text without a declaration is returned as is.
    """
    lowered = text.lower()
    if lowered.startswith(DOCTYPE):
        return text
    index = lowered.find(DOCTYPE)
    if index > 0:
        return text[index:]
    return text


def has_doctype(text: str) -> bool:
    """True if the text contains a document type declaration anywhere."""
    return DOCTYPE in text.lower()


def clean_generated_code(text: str) -> str:
    """Coder cleanup: fences, trim, relocate to the declaration."""
    return relocate_to_doctype(strip_code_fences(text or "").strip())


def clean_reviewed_code(text: str) -> str:
    """Reviewer cleanup: fences, narrative preamble, trim, relocate to the declaration."""
    cleaned = strip_leading_narrative(strip_code_fences(text or "").strip())
    return relocate_to_doctype(cleaned.strip())
