"""Dependency Injection Container - centralized service management."""

from functools import cached_property, lru_cache

from uiforge.application.generation.use_case import GenerationUseCase
from uiforge.domain.errors import ConfigurationError
from uiforge.domain.ports.config import AppConfig, ResolvedModelSet
from uiforge.domain.ports.llm import LLMPort
from uiforge.infrastructure.config import load_config


class Container:
    """Dependency Injection Container with lazy initialization.

    All dependencies are created on first access and cached.

    Usage:
        container = Container()
        use_case = container.generation_use_case
    """

    def __init__(self, config: AppConfig | None = None):
        """Initialize container with optional config override."""
        self._config_override = config

    @cached_property
    def config(self) -> AppConfig:
        """Application configuration."""
        if self._config_override:
            return self._config_override
        return load_config()

    @cached_property
    def llm(self) -> LLMPort:
        """LLM adapter based on config provider."""
        provider = self.config.llm.provider
        if provider == "openai_compatible":
            from uiforge.infrastructure.llm.openai_compatible import OpenAICompatibleAdapter

            return OpenAICompatibleAdapter(self.config.openai_compatible)
        if provider == "ollama":
            from uiforge.infrastructure.llm.ollama import OllamaAdapter

            return OllamaAdapter(self.config.ollama)
        raise ConfigurationError(f"Unknown LLM provider: {provider!r}")

    @cached_property
    def models(self) -> ResolvedModelSet:
        """Per-stage model IDs for the configured provider."""
        return self.config.models.get_models_for_provider(self.config.llm.provider)

    @cached_property
    def generation_use_case(self) -> GenerationUseCase:
        """Pipeline entry point. Stateless across invocations, safe to share."""
        return GenerationUseCase(llm=self.llm, models=self.models)


@lru_cache
def get_container() -> Container:
    """Process-wide container."""
    return Container()
