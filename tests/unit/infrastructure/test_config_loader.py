"""Tests for TOML config loader."""

from pathlib import Path

import pytest

from uiforge.infrastructure.config.toml_loader import _apply_env_overrides, load_config

ENV_VARS = (
    "LLM_PROVIDER",
    "HF_TOKEN",
    "OPENAI_BASE_URL",
    "OLLAMA_HOST",
    "UIFORGE_MODEL",
    "PORT",
    "LOG_LEVEL",
    "LOG_FILE",
    "CORS_ORIGINS",
    "RATE_LIMIT_PER_MINUTE",
    "PIPELINE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(self):
        config = load_config()

        assert config.llm.provider == "openai_compatible"
        assert config.openai_compatible.base_url == "https://router.huggingface.co/v1"
        assert config.openai_compatible.api_key == ""
        assert config.models.default == "Qwen/Qwen2.5-VL-7B-Instruct"
        assert config.pipeline.invocation_timeout == 300.0
        assert config.security.rate_limit_requests_per_minute == 30

    def test_default_ollama_models(self):
        models = load_config().models.get_models_for_provider("ollama")
        assert models.for_stage("coder") == "qwen2.5vl:7b"

    def test_loads_from_custom_dir(self, tmp_path: Path):
        (tmp_path / "default.toml").write_text(
            """
[llm]
provider = "ollama"

[server]
port = 9999

[models]
default = "base"
coder = "coder-model"

[models.ollama]
reviewer = "local-reviewer"
"""
        )
        config = load_config(tmp_path)

        assert config.llm.provider == "ollama"
        assert config.server.port == 9999
        models = config.models.get_models_for_provider("ollama")
        assert models.for_stage("coder") == "coder-model"
        assert models.for_stage("reviewer") == "local-reviewer"
        assert models.for_stage("planner") == "base"

    def test_merges_development_config(self, tmp_path: Path):
        (tmp_path / "default.toml").write_text('[llm]\nprovider = "ollama"\n\n[server]\nport = 8000\n')
        (tmp_path / "development.toml").write_text('[llm]\nprovider = "openai_compatible"\n')

        config = load_config(tmp_path)

        assert config.llm.provider == "openai_compatible"
        assert config.server.port == 8000

    def test_empty_dir_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config.llm.provider == "openai_compatible"
        assert config.openai_compatible.api_key_required is True


class TestEnvOverrides:
    """Tests for environment variable overrides."""

    def test_hf_token(self, monkeypatch):
        monkeypatch.setenv("HF_TOKEN", " hf_abc ")
        assert _apply_env_overrides({})["openai_compatible"]["api_key"] == "hf_abc"

    def test_provider_and_model(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "ollama")
        monkeypatch.setenv("UIFORGE_MODEL", "qwen2.5vl:3b")
        config = _apply_env_overrides({})
        assert config["llm"]["provider"] == "ollama"
        assert config["models"]["default"] == "qwen2.5vl:3b"

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        assert _apply_env_overrides({})["security"]["cors_origins"] == ["http://a.test", "http://b.test"]

    def test_numeric_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "5")
        monkeypatch.setenv("PIPELINE_TIMEOUT", "42.5")
        config = _apply_env_overrides({})
        assert config["server"]["port"] == 9000
        assert config["security"]["rate_limit_requests_per_minute"] == 5
        assert config["pipeline"]["invocation_timeout"] == 42.5

    def test_invalid_numbers_ignored(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        monkeypatch.setenv("PIPELINE_TIMEOUT", "soon")
        config = _apply_env_overrides({"server": {"port": 8000}})
        assert config["server"]["port"] == 8000
        assert "pipeline" not in config

    def test_env_reaches_app_config(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("HF_TOKEN", "hf_abc")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = load_config(tmp_path)
        assert config.openai_compatible.api_key == "hf_abc"
        assert config.log_level == "DEBUG"
