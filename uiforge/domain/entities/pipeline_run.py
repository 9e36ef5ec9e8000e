"""Pipeline shapes selected by the classifier verdict."""

from dataclasses import dataclass
from typing import ClassVar

from uiforge.domain.entities.pipeline_events import PipelineStep


@dataclass(frozen=True)
class QuickReplyRun:
    """Non-coding input: one scoped reply, no code."""

    kind: ClassVar[str] = "quick_reply"
    steps: ClassVar[tuple[PipelineStep, ...]] = (PipelineStep.NON_CODE_RESPONDING,)


@dataclass(frozen=True)
class CodeGenerationRun:
    """Code request: plan, generate, review, confirm."""

    kind: ClassVar[str] = "code_generation"
    steps: ClassVar[tuple[PipelineStep, ...]] = (
        PipelineStep.PLANNING,
        PipelineStep.CODING,
        PipelineStep.REVIEWING,
        PipelineStep.RESPONDING,
    )


PipelineRun = QuickReplyRun | CodeGenerationRun


def select_run(is_code_request: bool) -> PipelineRun:
    """Pick the pipeline shape once, from the classifier verdict."""
    if is_code_request:
        return CodeGenerationRun()
    return QuickReplyRun()
