"""Validate configured pipeline models against available provider models at startup."""

import structlog

from uiforge.domain.ports.config import AppConfig
from uiforge.domain.ports.llm import LLMPort

log = structlog.get_logger()


async def validate_models_config(llm: LLMPort, config: AppConfig) -> list[str]:
    """Check that configured stage models exist in the LLM provider. Log warnings for missing models.

    Does not fail startup if the provider is unreachable or models are missing.
    Returns the stages whose model was not found.
    """
    provider = config.llm.provider
    models = config.models.get_models_for_provider(provider)

    try:
        available = await llm.list_models()
    except Exception as e:  # noqa: BLE001
        log.warning(
            "models_validation_skipped",
            reason="llm_unreachable",
            provider=provider,
            error=str(e),
        )
        return []

    if not available:
        log.warning(
            "models_validation_skipped",
            reason="no_models_returned",
            provider=provider,
        )
        return []

    # Exact names + base names (e.g. "qwen2.5vl" matches "qwen2.5vl:7b"), provider suffixes dropped
    available_set: set[str] = set()
    for m in available:
        name = m.strip().lower()
        if not name:
            continue
        available_set.add(name)
        available_set.add(name.split(":")[0])

    missing: list[str] = []
    for stage, model in models.items():
        name = model.strip().lower()
        if name in available_set or name.split(":")[0] in available_set:
            continue
        missing.append(stage)
        log.warning(
            "model_not_available",
            stage=stage,
            model=model,
            provider=provider,
        )

    if not missing:
        log.info("models_validation_ok", provider=provider, model_count=len(available))
    return missing
