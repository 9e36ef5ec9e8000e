"""OpenAI-compatible adapter - Hugging Face router, vLLM, TGI, LM Studio."""

import logging

import httpx

from uiforge.domain.errors import ConfigurationError
from uiforge.domain.ports.config import OpenAICompatibleConfig
from uiforge.domain.ports.llm import LLMMessage, LLMResponse

logger = logging.getLogger(__name__)


class OpenAICompatibleAdapter:
    """Implements LLMPort via /chat/completions. Vision content is sent as image_url parts."""

    def __init__(self, config: OpenAICompatibleConfig) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if config.api_key:
            self._headers["Authorization"] = f"Bearer {config.api_key}"
        self._client: httpx.AsyncClient | None = None

    def ensure_credentials(self) -> None:
        """Fail loudly when the endpoint needs a token and none is configured."""
        if self._config.api_key_required and not self._config.api_key:
            raise ConfigurationError(
                "Missing model access token: set HF_TOKEN or openai_compatible.api_key"
            )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create persistent async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                headers=self._headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client (call during app shutdown)."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _chat_body(
        self,
        model: str,
        messages: list[LLMMessage],
        temperature: float,
        max_tokens: int | None,
        repetition_penalty: float | None,
    ) -> dict:
        """Build request body. repetition_penalty is a vLLM/TGI extension field."""
        body: dict = {
            "model": model,
            "messages": [m.model_dump(exclude_none=True) for m in messages],
            "temperature": temperature,
            "stream": False,
        }
        if max_tokens is not None:
            body["max_tokens"] = max_tokens
        if repetition_penalty is not None:
            body["repetition_penalty"] = repetition_penalty
        return body

    async def generate(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        repetition_penalty: float | None = None,
    ) -> LLMResponse:
        """Generate a single response. HTTP errors are raised, never retried."""
        self.ensure_credentials()
        model = model or "default"
        body = self._chat_body(model, messages, temperature, max_tokens, repetition_penalty)
        client = self._get_client()
        resp = await client.post(
            f"{self._base_url}/chat/completions",
            json=body,
        )
        if resp.status_code >= 400:
            logger.error(
                "LLM API error %s: %s",
                resp.status_code,
                resp.text[:500],
                extra={"model": model},
            )
        resp.raise_for_status()
        data = resp.json()
        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content") or ""
        return LLMResponse(content=content, model=data.get("model") or model, done=True)

    async def _get_models_endpoint(self) -> httpx.Response | None:
        """GET /models with a short timeout; None when the endpoint is unreachable."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                return await client.get(f"{self._base_url}/models", headers=self._headers)
        except httpx.HTTPError as e:
            logger.debug("OpenAI-compatible /models request failed: %s", e)
            return None

    async def is_available(self) -> bool:
        """Check if the endpoint answers /models."""
        resp = await self._get_models_endpoint()
        return resp is not None and resp.status_code == 200

    async def list_models(self) -> list[str]:
        """Model IDs from /models; empty when the endpoint is down or refuses."""
        resp = await self._get_models_endpoint()
        if resp is None:
            return []
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug("OpenAI-compatible list_models failed: %s", e)
            return []
        return [m["id"] for m in resp.json().get("data", []) if m.get("id")]
