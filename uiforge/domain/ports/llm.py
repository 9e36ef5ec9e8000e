"""LLM Port - interface for language model providers."""

from typing import Annotated, Literal, Protocol

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ImageURL(BaseModel):
    """Image reference: data URI or remote URL."""

    url: str


class ImagePart(BaseModel):
    """Image content part for vision-capable models."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


ContentPart = Annotated[TextPart | ImagePart, Field(discriminator="type")]


class LLMMessage(BaseModel):
    """Single message in a conversation. Content is plain text or mixed text+image parts."""

    role: str  # "system" | "user" | "assistant"
    content: str | list[ContentPart]

    @property
    def text(self) -> str:
        """Concatenated text of the message, ignoring image parts."""
        if isinstance(self.content, str):
            return self.content
        return "\n".join(p.text for p in self.content if isinstance(p, TextPart))

    @property
    def image_urls(self) -> list[str]:
        """Image references attached to the message."""
        if isinstance(self.content, str):
            return []
        return [p.image_url.url for p in self.content if isinstance(p, ImagePart)]


class LLMResponse(BaseModel):
    """Response from LLM (first completion only)."""

    content: str
    model: str
    done: bool = True


class LLMPort(Protocol):
    """Interface for LLM providers (Hugging Face router, vLLM, Ollama, etc.)."""

    def ensure_credentials(self) -> None:
        """Raise ConfigurationError if a required access credential is absent."""
        ...

    async def generate(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        repetition_penalty: float | None = None,
    ) -> LLMResponse:
        """Generate a single response (non-streaming)."""
        ...

    async def is_available(self) -> bool:
        """Check if the LLM provider is reachable."""
        ...

    async def list_models(self) -> list[str]:
        """List available models."""
        ...

    async def close(self) -> None:
        """Release pooled connections (app shutdown)."""
        ...
