"""Quick responder - scoped reply for non-coding input."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.agents.llm_helpers import complete, system_message, user_message
from uiforge.infrastructure.agents.prompts import QUICK_RESPONDER_SYSTEM

log = structlog.get_logger()

MAX_TOKENS = 300
TEMPERATURE = 0.5

FALLBACK_REPLY = (
    "I'm UI Forge, your UI design assistant. Describe a page or component, or upload a screenshot, "
    "and I'll generate the interface for you."
)


async def quick_responder_node(state: PipelineState, llm: LLMPort, model: str) -> PipelineState:
    """One model call under a strict UI-only persona. Never produces code."""
    request = state.get("user_request", "")
    log.info("quick_responder_start", request_chars=len(request))
    reply = await complete(
        llm,
        [system_message(QUICK_RESPONDER_SYSTEM), user_message(request)],
        model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )
    if not reply:
        log.warning("quick_responder_empty_completion")
    return {"reply": reply or FALLBACK_REPLY, "final_code": ""}
