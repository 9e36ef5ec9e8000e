"""Generation API routes."""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sse_starlette.sse import EventSourceResponse

from uiforge.api.dependencies import generate_rate_limit, get_config, get_generation_use_case, limiter
from uiforge.application.generation.dto import GenerationRequest, GenerationResponse, GenerationStreamEvent
from uiforge.application.generation.use_case import GenerationUseCase
from uiforge.domain.entities.pipeline_events import PipelineEventType
from uiforge.domain.errors import ConfigurationError
from uiforge.domain.ports.config import AppConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=None)
@limiter.limit(generate_rate_limit)
async def generate(
    request: Request,
    generation_request: GenerationRequest,
    use_case: GenerationUseCase = Depends(get_generation_use_case),
    config: AppConfig = Depends(get_config),
    stream: bool = False,
) -> GenerationResponse | EventSourceResponse:
    """Run the pipeline. Use stream=true for SSE stage events."""
    if stream:
        return _stream_response(generation_request, use_case, config.pipeline.invocation_timeout)
    try:
        return await asyncio.wait_for(
            use_case.invoke(generation_request),
            timeout=config.pipeline.invocation_timeout,
        )
    except ConfigurationError:
        logger.exception("Generation pipeline misconfigured")
        raise HTTPException(status_code=503, detail="Generation service is not configured")
    except TimeoutError:
        logger.warning("Generation timed out after %ss", config.pipeline.invocation_timeout)
        raise HTTPException(status_code=504, detail="Generation timed out")
    except Exception:
        logger.exception("Generation failed")
        raise HTTPException(status_code=502, detail="Failed to generate. Please try again.")


def _stream_response(
    generation_request: GenerationRequest,
    use_case: GenerationUseCase,
    timeout: float,
) -> EventSourceResponse:
    """Return SSE stream of pipeline events; the whole run shares one deadline."""

    async def event_generator():
        deadline = asyncio.get_running_loop().time() + timeout
        events = use_case.invoke_stream(generation_request)
        try:
            while True:
                try:
                    async with asyncio.timeout_at(deadline):
                        evt = await anext(events)
                except StopAsyncIteration:
                    break
                except TimeoutError:
                    logger.warning("Generation stream timed out after %ss", timeout)
                    timed_out = GenerationStreamEvent(
                        event_type=PipelineEventType.ERROR.value,
                        payload={"error": "TimeoutError"},
                    )
                    yield {"event": timed_out.event_type, "data": timed_out.model_dump_json()}
                    break
                yield {"event": evt.event_type, "data": evt.model_dump_json()}
        finally:
            await events.aclose()
        yield {"event": "close", "data": ""}

    return EventSourceResponse(event_generator())
