"""Responder agent - short confirmation message for the generated design."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.agents.llm_helpers import complete, system_message, user_message
from uiforge.infrastructure.agents.prompts import (
    RESPONDER_ACTION_NEW,
    RESPONDER_ACTION_UPDATE,
    RESPONDER_SYSTEM,
)

log = structlog.get_logger()

MAX_TOKENS = 150
TEMPERATURE = 0.6
PLAN_EXCERPT_CHARS = 600
MIN_UPDATE_CODE_CHARS = 50

FALLBACK_REPLY = "Your design is ready! Take a look at the preview and tell me if you'd like any changes."


def is_update(current_code: str | None) -> bool:
    """Refinement of a non-trivial prior artifact."""
    return len((current_code or "").strip()) > MIN_UPDATE_CODE_CHARS


async def responder_node(state: PipelineState, llm: LLMPort, model: str) -> PipelineState:
    """One model call producing the chat reply. Updates state['reply']."""
    update = is_update(state.get("current_code"))
    system = RESPONDER_SYSTEM.format(
        action=RESPONDER_ACTION_UPDATE if update else RESPONDER_ACTION_NEW,
        plan=state.get("plan", "")[:PLAN_EXCERPT_CHARS],
    )
    reply = await complete(
        llm,
        [system_message(system), user_message(state.get("user_request", ""))],
        model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )
    if not reply:
        log.warning("responder_empty_completion")
    log.info("responder_done", update=update)
    return {"reply": reply or FALLBACK_REPLY}
