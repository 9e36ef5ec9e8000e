"""Generation application layer."""

from uiforge.application.generation.dto import (
    GenerationRequest,
    GenerationResponse,
    GenerationStreamEvent,
)
from uiforge.application.generation.use_case import GenerationUseCase

__all__ = [
    "GenerationRequest",
    "GenerationResponse",
    "GenerationStreamEvent",
    "GenerationUseCase",
]
