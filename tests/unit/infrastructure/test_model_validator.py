"""Tests for model validator."""

from unittest.mock import AsyncMock

import pytest

from uiforge.domain.ports.config import AppConfig, LLMConfig, ModelConfig
from uiforge.infrastructure.config.model_validator import validate_models_config


@pytest.fixture
def config():
    """Ollama config with one stage on a different model."""
    return AppConfig(
        llm=LLMConfig(provider="ollama"),
        models=ModelConfig(default="qwen2.5vl:7b", coder="big-coder:latest"),
    )


@pytest.mark.asyncio
async def test_all_models_available(config):
    llm = AsyncMock()
    llm.list_models = AsyncMock(return_value=["qwen2.5vl:7b", "big-coder:latest"])
    assert await validate_models_config(llm, config) == []
    llm.list_models.assert_called_once()


@pytest.mark.asyncio
async def test_missing_stage_reported(config):
    llm = AsyncMock()
    llm.list_models = AsyncMock(return_value=["qwen2.5vl:7b"])
    assert await validate_models_config(llm, config) == ["coder"]


@pytest.mark.asyncio
async def test_base_name_matches_tag(config):
    llm = AsyncMock()
    llm.list_models = AsyncMock(return_value=["qwen2.5vl:latest", "big-coder"])
    assert await validate_models_config(llm, config) == []


@pytest.mark.asyncio
async def test_unreachable_provider_skips(config):
    llm = AsyncMock()
    llm.list_models = AsyncMock(side_effect=ConnectionError("refused"))
    assert await validate_models_config(llm, config) == []


@pytest.mark.asyncio
async def test_no_models_returned_skips(config):
    llm = AsyncMock()
    llm.list_models = AsyncMock(return_value=[])
    assert await validate_models_config(llm, config) == []
