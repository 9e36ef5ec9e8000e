"""FastAPI dependencies."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from uiforge.api.container import get_container
from uiforge.application.generation.use_case import GenerationUseCase
from uiforge.domain.ports.config import AppConfig

limiter = Limiter(key_func=get_remote_address)


def get_config() -> AppConfig:
    """Loaded once per process via the container."""
    return get_container().config


def get_generation_use_case() -> GenerationUseCase:
    """Shared GenerationUseCase; each call builds its own pipeline state."""
    return get_container().generation_use_case


def generate_rate_limit() -> str:
    """slowapi limit string from config."""
    return f"{get_config().security.rate_limit_requests_per_minute}/minute"
