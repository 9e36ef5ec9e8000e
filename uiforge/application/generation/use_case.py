"""Generation use case - the pipeline entry point for request handlers."""

import uuid
from collections.abc import AsyncIterator

import structlog

from uiforge.application.generation.dto import (
    GenerationRequest,
    GenerationResponse,
    GenerationStreamEvent,
)
from uiforge.domain.entities.pipeline_events import PipelineEventType, PipelineStep
from uiforge.domain.entities.pipeline_state import PipelineState, new_pipeline_state
from uiforge.domain.ports.config import ResolvedModelSet
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.workflow import PipelineController
from uiforge.shared.logging import bind_invocation, clear_invocation

log = structlog.get_logger()


def _state_to_response(state: PipelineState) -> GenerationResponse:
    """Map final pipeline state to response."""
    return GenerationResponse(
        final_code=state.get("final_code", "") or "",
        reply=state.get("reply", "") or "",
        plan=state.get("plan", "") or "",
        is_code_request=state.get("is_code_request", True),
    )


def _initial_state(request: GenerationRequest) -> PipelineState:
    return new_pipeline_state(
        user_request=request.user_request,
        image_url=request.image_url,
        current_code=request.current_code,
        messages=request.messages,
    )


class GenerationUseCase:
    """Runs classifier → quick_responder | planner → coder → reviewer → responder."""

    def __init__(self, llm: LLMPort, models: ResolvedModelSet) -> None:
        self._controller = PipelineController(llm, models)

    async def invoke(self, request: GenerationRequest) -> GenerationResponse:
        """Run the pipeline, return the full result. Upstream failures propagate."""
        bind_invocation(str(uuid.uuid4()))
        try:
            log.info("pipeline_start", has_image=bool(request.image_url), refinement=bool(request.current_code))
            final = await self._controller.invoke(_initial_state(request))
            response = _state_to_response(final)
            log.info(
                "pipeline_done",
                is_code_request=response.is_code_request,
                code_chars=len(response.final_code),
            )
            return response
        finally:
            clear_invocation()

    async def invoke_stream(self, request: GenerationRequest) -> AsyncIterator[GenerationStreamEvent]:
        """Run the pipeline, yielding a stage event per finished stage, then done or error."""
        bind_invocation(str(uuid.uuid4()), stream=True)
        try:
            async for step, update in self._controller.stream(_initial_state(request)):
                if step is PipelineStep.DONE:
                    yield GenerationStreamEvent(
                        event_type=PipelineEventType.DONE.value,
                        payload=_state_to_response(update).model_dump(),
                    )
                else:
                    yield GenerationStreamEvent(
                        event_type=PipelineEventType.STAGE.value,
                        stage=step.value,
                        payload=dict(update),
                    )
        except Exception as e:
            log.exception("pipeline_stream_failed")
            yield GenerationStreamEvent(event_type=PipelineEventType.ERROR.value, payload={"error": type(e).__name__})
        finally:
            clear_invocation()
