"""Ollama adapter - implements LLMPort for local vision models."""

import base64
import logging

import httpx
from ollama import AsyncClient

from uiforge.domain.ports.config import OllamaConfig
from uiforge.domain.ports.llm import LLMMessage, LLMResponse

logger = logging.getLogger(__name__)

# Fail fast when the host is down; the read timeout covers long generations
DEFAULT_CONNECT_TIMEOUT = 5.0


class OllamaAdapter:
    """Ollama implementation of LLMPort. Image parts are sent as base64 in ``images``."""

    def __init__(self, config: OllamaConfig) -> None:
        self._config = config
        read_timeout = float(config.timeout) if config.timeout else 180.0
        timeout = httpx.Timeout(
            connect=DEFAULT_CONNECT_TIMEOUT,
            read=read_timeout,
            write=read_timeout,
            pool=30.0,
        )
        self._client = AsyncClient(host=config.host, timeout=timeout)

    def ensure_credentials(self) -> None:
        """Local server, nothing to check."""

    async def close(self) -> None:
        """Nothing pooled outside the ollama client."""

    def _ollama_options(
        self,
        temperature: float,
        max_tokens: int | None,
        repetition_penalty: float | None,
    ) -> dict:
        """Build options dict: temperature + optional num_predict, repeat_penalty, num_ctx."""
        opts: dict = {"temperature": temperature}
        if max_tokens is not None:
            opts["num_predict"] = max_tokens
        if repetition_penalty is not None:
            opts["repeat_penalty"] = repetition_penalty
        if self._config.num_ctx is not None:
            opts["num_ctx"] = self._config.num_ctx
        return opts

    async def _image_payload(self, url: str) -> str:
        """Base64 image data from a data URI or a remote URL."""
        if url.startswith("data:"):
            _, _, data = url.partition(",")
            return data
        async with httpx.AsyncClient(timeout=30.0, follow_redirects=True) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return base64.b64encode(resp.content).decode("ascii")

    async def _to_ollama_message(self, message: LLMMessage) -> dict:
        msg: dict = {"role": message.role, "content": message.text}
        urls = message.image_urls
        if urls:
            msg["images"] = [await self._image_payload(u) for u in urls]
        return msg

    async def generate(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        repetition_penalty: float | None = None,
    ) -> LLMResponse:
        """Generate a single response. Client errors propagate to the caller."""
        model = model or "qwen2.5vl:7b"
        msg_dicts = [await self._to_ollama_message(m) for m in messages]
        response = await self._client.chat(
            model=model,
            messages=msg_dicts,
            options=self._ollama_options(temperature, max_tokens, repetition_penalty),
        )
        content = (response.message.content if response.message else "") or ""
        return LLMResponse(content=content, model=response.model or model, done=True)

    async def is_available(self) -> bool:
        """Check if Ollama server is available. Fail-fast, no stale cache."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                resp = await client.get(f"{self._config.host.rstrip('/')}/api/tags")
                if resp.status_code == 200:
                    return True
        except httpx.HTTPError as e:
            logger.debug("Ollama availability check failed: %s", e)
        return False

    async def list_models(self) -> list[str]:
        """List available models from Ollama."""
        try:
            resp = await self._client.list()
            if not resp.models:
                return []
            # ollama package: Model has 'model' attr (newer) or 'name' (legacy)
            names = [getattr(m, "model", None) or getattr(m, "name", "") for m in resp.models]
            return [n for n in names if n]
        except (httpx.ConnectTimeout, httpx.ConnectError, ConnectionError) as e:
            logger.debug("Ollama list_models failed (unreachable): %s", e)
            return []
        except Exception as e:  # noqa: BLE001
            logger.warning("Ollama list_models failed: %s", e, exc_info=True)
            return []
