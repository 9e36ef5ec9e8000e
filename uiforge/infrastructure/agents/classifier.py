"""Classifier stage - sanitizes the request and records the routing verdict."""

import structlog

from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.services.request_classifier import classify_request

log = structlog.get_logger()


def classifier_node(state: PipelineState) -> PipelineState:
    """Replace user_request with its sanitized form and set is_code_request. No model call."""
    has_image = bool(state.get("image_url"))
    verdict = classify_request(state.get("user_request", ""), has_image)
    log.info(
        "classifier_done",
        kind=verdict.kind,
        has_image=has_image,
        filtered="[FILTERED]" in verdict.sanitized_request,
    )
    return {
        "user_request": verdict.sanitized_request,
        "is_code_request": verdict.is_code_request,
    }
