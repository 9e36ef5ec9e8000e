"""Pipeline state schema for LangGraph."""

import operator
from typing import Annotated, TypedDict

from pydantic import BaseModel


class ConversationTurn(BaseModel):
    """One turn of external chat history."""

    role: str  # "user" | "assistant"
    content: str


class PipelineState(TypedDict, total=False):
    """Context threaded through the pipeline stages for one invocation.

    Scalar fields are last-write-wins; ``messages`` accumulates by concatenation.
    """

    # Input
    user_request: str  # Raw, replaced by the sanitized text after classification
    image_url: str | None  # Data URI or remote URL, passed through to vision stages
    current_code: str | None  # Prior artifact on refinement requests

    # Steps
    is_code_request: bool
    plan: str
    final_code: str
    reply: str

    # Carried for external chat history; not read by any stage prompt
    messages: Annotated[list[ConversationTurn], operator.add]


def new_pipeline_state(
    user_request: str,
    image_url: str | None = None,
    current_code: str | None = None,
    messages: list[ConversationTurn] | None = None,
) -> PipelineState:
    """Fresh state for one invocation. Unclassified requests route to generation."""
    return {
        "user_request": user_request,
        "image_url": image_url or None,
        "current_code": current_code or None,
        "is_code_request": True,
        "plan": "",
        "final_code": "",
        "reply": "",
        "messages": list(messages or []),
    }
