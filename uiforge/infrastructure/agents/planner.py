"""Planner agent - extracts a structured design specification from request and screenshot."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.agents.llm_helpers import complete, system_message, user_message
from uiforge.infrastructure.agents.prompts import (
    PLANNER_IMAGE_CLAUSE,
    PLANNER_MODE_NEW,
    PLANNER_MODE_REFINE,
    PLANNER_SYSTEM,
)

log = structlog.get_logger()

MAX_TOKENS = 2000
TEMPERATURE = 0.2
MAX_CURRENT_CODE_CHARS = 6000


def build_planner_messages(request: str, image_url: str | None, current_code: str | None):
    """System prompt with mode flag; user turn carries request, existing code and image."""
    system = PLANNER_SYSTEM.format(
        image_clause=PLANNER_IMAGE_CLAUSE if image_url else "",
        mode=PLANNER_MODE_REFINE if current_code else PLANNER_MODE_NEW,
    )
    user_text = f"USER REQUEST:\n{request or '(no text, follow the screenshot)'}"
    if current_code:
        user_text += f"\n\nEXISTING CODE:\n{current_code[:MAX_CURRENT_CODE_CHARS]}"
    return [system_message(system), user_message(user_text, image_url)]


async def planner_node(state: PipelineState, llm: LLMPort, model: str) -> PipelineState:
    """Generate the design plan. Updates state['plan'] verbatim, no retries."""
    image_url = state.get("image_url")
    current_code = state.get("current_code")
    log.info("planner_start", has_image=bool(image_url), refinement=bool(current_code))
    plan = await complete(
        llm,
        build_planner_messages(state.get("user_request", ""), image_url, current_code),
        model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
    )
    log.info("planner_done", plan_chars=len(plan))
    return {"plan": plan}
