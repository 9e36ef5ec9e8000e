"""LangGraph pipeline - classifier, then quick_responder | planner → coder → reviewer → responder."""

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

import structlog
from langgraph.graph import END, START, StateGraph

from uiforge.domain.entities.pipeline_events import PipelineStep
from uiforge.domain.entities.pipeline_run import CodeGenerationRun, PipelineRun, QuickReplyRun, select_run
from uiforge.domain.entities.pipeline_state import PipelineState
from uiforge.domain.errors import StageContractError
from uiforge.domain.ports.config import ResolvedModelSet
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.agents.classifier import classifier_node
from uiforge.infrastructure.agents.coder import coder_node
from uiforge.infrastructure.agents.planner import planner_node
from uiforge.infrastructure.agents.quick_responder import quick_responder_node
from uiforge.infrastructure.agents.responder import responder_node
from uiforge.infrastructure.agents.reviewer import reviewer_node

log = structlog.get_logger()

StageFn = Callable[[PipelineState, LLMPort, str], Awaitable[PipelineState]]


@dataclass(frozen=True)
class Stage:
    """A model-calling stage and the state fields it owns."""

    step: PipelineStep
    fn: StageFn
    writes: frozenset[str]


STAGES: dict[PipelineStep, Stage] = {
    PipelineStep.NON_CODE_RESPONDING: Stage(
        PipelineStep.NON_CODE_RESPONDING, quick_responder_node, frozenset({"reply", "final_code"})
    ),
    PipelineStep.PLANNING: Stage(PipelineStep.PLANNING, planner_node, frozenset({"plan"})),
    PipelineStep.CODING: Stage(PipelineStep.CODING, coder_node, frozenset({"final_code"})),
    PipelineStep.REVIEWING: Stage(PipelineStep.REVIEWING, reviewer_node, frozenset({"final_code"})),
    PipelineStep.RESPONDING: Stage(PipelineStep.RESPONDING, responder_node, frozenset({"reply"})),
}

CLASSIFIER_WRITES = frozenset({"user_request", "is_code_request"})


def _check_writes(step: PipelineStep, update: PipelineState, writes: frozenset[str]) -> PipelineState:
    stray = set(update) - writes
    if stray:
        raise StageContractError(step.value, stray)
    return update


def build_run_graph(run: PipelineRun, llm: LLMPort, models: ResolvedModelSet) -> StateGraph:
    """Linear graph for one pipeline shape: START → stage → ... → END."""
    builder = StateGraph(PipelineState)

    def make_node(stage: Stage):
        model = models.for_stage(stage.step.value)

        async def node(state: PipelineState) -> PipelineState:
            update = await stage.fn(state, llm, model)
            return _check_writes(stage.step, update, stage.writes)

        return node

    previous = START
    for step in run.steps:
        builder.add_node(step.value, make_node(STAGES[step]))
        builder.add_edge(previous, step.value)
        previous = step.value
    builder.add_edge(previous, END)
    return builder


class PipelineController:
    """Sequences the stages for one invocation and merges their partial updates.

    Both pipeline shapes are compiled once; the classifier verdict picks one.
    No checkpointer: state lives for a single invocation.
    """

    def __init__(self, llm: LLMPort, models: ResolvedModelSet) -> None:
        self._llm = llm
        self._graphs = {
            run.kind: build_run_graph(run, llm, models).compile()
            for run in (QuickReplyRun(), CodeGenerationRun())
        }

    def classify(self, state: PipelineState) -> tuple[PipelineState, PipelineRun]:
        """Run the classifier stage and select the pipeline shape."""
        update = _check_writes(PipelineStep.CLASSIFYING, classifier_node(state), CLASSIFIER_WRITES)
        classified: PipelineState = {**state, **update}
        return classified, select_run(classified["is_code_request"])

    async def invoke(self, state: PipelineState) -> PipelineState:
        """Run the pipeline to completion. Credential errors raise before any stage runs."""
        self._llm.ensure_credentials()
        classified, run = self.classify(state)
        log.info("pipeline_run_selected", run=run.kind)
        return await self._graphs[run.kind].ainvoke(classified)

    async def stream(self, state: PipelineState) -> AsyncIterator[tuple[PipelineStep, PipelineState]]:
        """Yield (step, partial update) as each stage finishes, then (DONE, final state)."""
        self._llm.ensure_credentials()
        classified, run = self.classify(state)
        log.info("pipeline_run_selected", run=run.kind)
        yield PipelineStep.CLASSIFYING, {
            "user_request": classified["user_request"],
            "is_code_request": classified["is_code_request"],
        }
        final: PipelineState = dict(classified)
        async for chunk in self._graphs[run.kind].astream(classified, stream_mode="updates"):
            for node_name, update in chunk.items():
                update = update or {}
                final.update(update)
                yield PipelineStep(node_name), update
        yield PipelineStep.DONE, final
