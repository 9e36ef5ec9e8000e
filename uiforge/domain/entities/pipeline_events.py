"""Pipeline steps and stream event types."""

from enum import Enum


class PipelineStep(str, Enum):
    """Controller states. Stage values double as graph node names."""

    CLASSIFYING = "classifier"
    NON_CODE_RESPONDING = "quick_responder"
    PLANNING = "planner"
    CODING = "coder"
    REVIEWING = "reviewer"
    RESPONDING = "responder"
    DONE = "done"


class PipelineEventType(str, Enum):
    """Event types streamed to client."""

    STAGE = "stage"  # a stage finished; payload is its partial update
    ERROR = "error"
    DONE = "done"
