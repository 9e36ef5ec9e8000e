"""Reviewer agent - validates and repairs generated HTML against a fixed checklist."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.ports.llm import LLMPort
from uiforge.domain.services.code_cleaner import clean_reviewed_code, has_doctype
from uiforge.infrastructure.agents.llm_helpers import complete, system_message, user_message
from uiforge.infrastructure.agents.prompts import (
    FONT_AWESOME_CDN,
    INTER_FONT_CDN,
    REVIEWER_SYSTEM,
    REVIEWER_USER,
    TAILWIND_CDN,
)

log = structlog.get_logger()

MAX_TOKENS = 4000
TEMPERATURE = 0.1
MIN_REVIEWABLE_CHARS = 100
PLAN_EXCERPT_CHARS = 1500


async def reviewer_node(state: PipelineState, llm: LLMPort, model: str) -> PipelineState:
    """Review state['final_code']; keep the original when the repair is not HTML."""
    code = state.get("final_code", "")
    if len(code.strip()) < MIN_REVIEWABLE_CHARS:
        log.info("reviewer_skipped", code_chars=len(code))
        return {"final_code": code}

    system = REVIEWER_SYSTEM.format(
        plan=state.get("plan", "")[:PLAN_EXCERPT_CHARS],
        tailwind_cdn=TAILWIND_CDN,
        font_awesome_cdn=FONT_AWESOME_CDN,
        inter_font_cdn=INTER_FONT_CDN,
    )
    log.info("reviewer_start", code_chars=len(code))
    raw = await complete(
        llm,
        [system_message(system), user_message(REVIEWER_USER.format(code=code), state.get("image_url"))],
        model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )
    reviewed = clean_reviewed_code(raw)
    if not has_doctype(reviewed):
        log.warning("reviewer_fallback", reviewed_chars=len(reviewed))
        return {"final_code": code}
    log.info("reviewer_done", code_chars=len(reviewed))
    return {"final_code": reviewed}
