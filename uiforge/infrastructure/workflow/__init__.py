"""Generation pipeline - LangGraph."""

from uiforge.infrastructure.workflow.graph import (
    PipelineController,
    build_run_graph,
)

__all__ = ["PipelineController", "build_run_graph"]
