"""Generation DTOs."""

from pydantic import BaseModel, Field, model_validator

from uiforge.domain.entities.pipeline_state import ConversationTurn


class GenerationRequest(BaseModel):
    """Request to run the generation pipeline. Text, a screenshot, or both."""

    user_request: str = Field("", max_length=50_000)  # Sanitized and truncated by the pipeline
    image_url: str | None = None  # Data URI or remote URL
    current_code: str | None = None  # Prior artifact, for refinement
    messages: list[ConversationTurn] = Field(default_factory=list)  # Accumulated history, currently unread

    @model_validator(mode="after")
    def _text_or_image(self) -> "GenerationRequest":
        if not self.user_request.strip() and not self.image_url:
            raise ValueError("user_request or image_url is required")
        return self


class GenerationResponse(BaseModel):
    """Pipeline result. The caller persists final_code and reply."""

    final_code: str  # "" for non-coding turns
    reply: str
    plan: str
    is_code_request: bool


class GenerationStreamEvent(BaseModel):
    """SSE event for streaming pipeline progress."""

    event_type: str  # stage, error, done
    stage: str | None = None
    payload: dict | None = None
