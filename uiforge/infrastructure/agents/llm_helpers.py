"""LLM helpers: message building and single-completion calls."""

from uiforge.domain.ports.llm import ImagePart, ImageURL, LLMMessage, LLMPort, TextPart


def system_message(content: str) -> LLMMessage:
    return LLMMessage(role="system", content=content)


def user_message(text: str, image_url: str | None = None) -> LLMMessage:
    """User turn; mixed text+image content when an image is attached."""
    if not image_url:
        return LLMMessage(role="user", content=text)
    return LLMMessage(
        role="user",
        content=[
            TextPart(text=text),
            ImagePart(image_url=ImageURL(url=image_url)),
        ],
    )


async def complete(
    llm: LLMPort,
    messages: list[LLMMessage],
    model: str,
    *,
    max_tokens: int,
    temperature: float,
    repetition_penalty: float | None = None,
) -> str:
    """Return the first completion's text ('' when the model yields nothing).

    Upstream failures propagate; the pipeline never retries on its own.
    """
    response = await llm.generate(
        messages=messages,
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        repetition_penalty=repetition_penalty,
    )
    return (response.content or "").strip()
