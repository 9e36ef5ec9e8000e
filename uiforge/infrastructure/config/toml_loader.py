"""TOML configuration loader with env overrides."""

import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path

from uiforge.domain.ports.config import (
    STAGE_NAMES,
    AppConfig,
    LLMConfig,
    ModelConfig,
    OllamaConfig,
    OpenAICompatibleConfig,
    PipelineConfig,
    SecurityConfig,
    ServerConfig,
    StageModelSet,
)

logger = logging.getLogger(__name__)


def _csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",")]


# (env var, TOML section, key, parser). Values that fail to parse are ignored.
ENV_OVERRIDES: tuple[tuple[str, str, str, Callable[[str], object]], ...] = (
    ("LLM_PROVIDER", "llm", "provider", str.strip),
    ("HF_TOKEN", "openai_compatible", "api_key", str.strip),
    ("OPENAI_BASE_URL", "openai_compatible", "base_url", str.strip),
    ("OLLAMA_HOST", "ollama", "host", str.strip),
    ("UIFORGE_MODEL", "models", "default", str.strip),
    ("PORT", "server", "port", int),
    ("LOG_LEVEL", "logging", "level", str.upper),
    ("LOG_FILE", "logging", "file", str.strip),
    ("CORS_ORIGINS", "security", "cors_origins", _csv),
    ("RATE_LIMIT_PER_MINUTE", "security", "rate_limit_requests_per_minute", int),
    ("PIPELINE_TIMEOUT", "pipeline", "invocation_timeout", float),
)


def _load_toml(path: Path) -> dict:
    """Load TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _merge_sections(base: dict, overlay: dict) -> dict:
    """Shallow-merge overlay tables into base tables; other keys are replaced."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _load_models_config(raw: dict) -> ModelConfig:
    """ModelConfig from [models]; nested tables ([models.ollama]) are provider overrides."""
    overrides = {k: StageModelSet(**v) for k, v in raw.items() if isinstance(v, dict)}
    stage_models = {
        k: v for k, v in raw.items() if isinstance(v, str) and (k == "default" or k in STAGE_NAMES)
    }
    return ModelConfig(overrides=overrides, **stage_models)


def _apply_env_overrides(config: dict) -> dict:
    """Apply environment variable overrides."""
    for env_name, section, key, parse in ENV_OVERRIDES:
        raw = os.getenv(env_name)
        if not raw:
            continue
        try:
            value = parse(raw)
        except ValueError:
            logger.warning("Invalid %s env value: %r, ignoring", env_name, raw)
            continue
        config.setdefault(section, {})[key] = value
    return config


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load configuration from TOML files with env overrides.

    Loads default.toml, then development.toml if it exists. Env vars win.
    """
    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent.parent.parent / "config"

    config: dict = {}
    for name in ("default.toml", "development.toml"):
        path = config_dir / name
        if path.exists():
            config = _merge_sections(config, _load_toml(path))

    config = _apply_env_overrides(config)

    logging_raw = config.get("logging") or {}
    return AppConfig(
        server=ServerConfig(**(config.get("server") or {})),
        llm=LLMConfig(**(config.get("llm") or {})),
        openai_compatible=OpenAICompatibleConfig(**(config.get("openai_compatible") or {})),
        ollama=OllamaConfig(**(config.get("ollama") or {})),
        models=_load_models_config(config.get("models") or {}),
        pipeline=PipelineConfig(**(config.get("pipeline") or {})),
        security=SecurityConfig(**(config.get("security") or {})),
        log_level=logging_raw.get("level", "INFO"),
        log_file=(logging_raw.get("file") or "").strip(),
        log_rotation_max_mb=int(logging_raw.get("log_rotation_max_mb", 5)),
        log_rotation_backups=int(logging_raw.get("log_rotation_backups", 3)),
    )
