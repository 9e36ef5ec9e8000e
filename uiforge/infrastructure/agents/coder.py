"""Coder agent - turns the plan into a complete HTML document."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.ports.llm import LLMPort
from uiforge.domain.services.code_cleaner import clean_generated_code, has_doctype
from uiforge.infrastructure.agents.llm_helpers import complete, system_message, user_message
from uiforge.infrastructure.agents.prompts import CODER_SYSTEM, CODER_USER, OUTPUT_SKELETON

log = structlog.get_logger()

MAX_TOKENS = 4000
TEMPERATURE = 0.1
REPETITION_PENALTY = 1.05


async def coder_node(state: PipelineState, llm: LLMPort, model: str) -> PipelineState:
    """Generate markup from the plan. Updates state['final_code'].

    Output without a document type declaration is still returned after cleaning.
    """
    image_url = state.get("image_url")
    system = CODER_SYSTEM.format(plan=state.get("plan", ""), skeleton=OUTPUT_SKELETON)
    log.info("coder_start", has_image=bool(image_url))
    raw = await complete(
        llm,
        [system_message(system), user_message(CODER_USER, image_url)],
        model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
        repetition_penalty=REPETITION_PENALTY,
    )
    code = clean_generated_code(raw)
    if code and not has_doctype(code):
        log.warning("coder_output_not_html", code_chars=len(code))
    log.info("coder_done", code_chars=len(code))
    return {"final_code": code}
