"""Config Port - typed application configuration sections."""

from pydantic import BaseModel, ConfigDict

STAGE_NAMES = ("quick_responder", "planner", "coder", "reviewer", "responder")


class StageModelSet(BaseModel):
    """Model IDs per pipeline stage for a specific provider. All optional, merged with defaults."""

    default: str | None = None
    quick_responder: str | None = None
    planner: str | None = None
    coder: str | None = None
    reviewer: str | None = None
    responder: str | None = None


class ModelConfig(BaseModel):
    """Model selection per pipeline stage. Provider-agnostic defaults + per-provider overrides."""

    default: str = "Qwen/Qwen2.5-VL-7B-Instruct"
    quick_responder: str | None = None
    planner: str | None = None
    coder: str | None = None
    reviewer: str | None = None
    responder: str | None = None
    # Per-provider overrides. Keys: provider name (openai_compatible, ollama).
    overrides: dict[str, StageModelSet] = {}

    model_config = ConfigDict(extra="ignore")

    def get_models_for_provider(self, provider: str) -> "ResolvedModelSet":
        """Resolve model IDs for provider.

        Precedence per stage: provider stage override, provider default,
        stage setting, global default.
        """
        o = self.overrides.get(provider) or StageModelSet()
        default = o.default or self.default
        resolved = {}
        for stage in STAGE_NAMES:
            resolved[stage] = getattr(o, stage) or (None if o.default else getattr(self, stage)) or default
        return ResolvedModelSet(default=default, **resolved)


class ResolvedModelSet:
    """Resolved model IDs for a provider. Immutable."""

    __slots__ = ("default", "quick_responder", "planner", "coder", "reviewer", "responder")

    def __init__(
        self,
        default: str,
        quick_responder: str,
        planner: str,
        coder: str,
        reviewer: str,
        responder: str,
    ) -> None:
        self.default = default
        self.quick_responder = quick_responder
        self.planner = planner
        self.coder = coder
        self.reviewer = reviewer
        self.responder = responder

    def for_stage(self, stage: str) -> str:
        """Model ID for a stage name; unknown stages get the default."""
        if stage in STAGE_NAMES:
            return getattr(self, stage)
        return self.default

    def items(self) -> list[tuple[str, str]]:
        """(stage, model) pairs in pipeline order."""
        return [(stage, getattr(self, stage)) for stage in STAGE_NAMES]


class LLMConfig(BaseModel):
    """LLM provider selection."""

    provider: str = "openai_compatible"  # "openai_compatible" | "ollama"


class OllamaConfig(BaseModel):
    """Ollama connection configuration."""

    host: str = "http://localhost:11434"
    timeout: int = 180
    # Optional: context window. None = model default.
    num_ctx: int | None = None


class OpenAICompatibleConfig(BaseModel):
    """Hugging Face router, vLLM, TGI, LM Studio - OpenAI-compatible chat completions API."""

    base_url: str = "https://router.huggingface.co/v1"
    api_key: str = ""
    # Local servers (LM Studio, vLLM without auth) can turn this off.
    api_key_required: bool = True
    timeout: int = 180


class PipelineConfig(BaseModel):
    """Settings applied by callers of the pipeline."""

    invocation_timeout: float = 300.0  # Five sequential model calls on the generation path


class SecurityConfig(BaseModel):
    """Security settings."""

    rate_limit_requests_per_minute: int = 30
    cors_origins: list[str] = ["http://localhost:3000"]


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    """Full application configuration."""

    server: ServerConfig = ServerConfig()
    llm: LLMConfig = LLMConfig()
    openai_compatible: OpenAICompatibleConfig = OpenAICompatibleConfig()
    ollama: OllamaConfig = OllamaConfig()
    models: ModelConfig = ModelConfig()
    pipeline: PipelineConfig = PipelineConfig()
    security: SecurityConfig = SecurityConfig()
    log_level: str = "INFO"
    # Log file: path relative to cwd or absolute. Empty = only stdout. Rotation when file exceeds max_mb.
    log_file: str = ""
    log_rotation_max_mb: int = 5
    log_rotation_backups: int = 3
