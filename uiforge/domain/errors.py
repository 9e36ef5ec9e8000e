"""Pipeline error taxonomy."""


class PipelineError(Exception):
    """Base class for errors raised by the generation pipeline."""


class ConfigurationError(PipelineError):
    """Required configuration (e.g. model access credential) is missing or invalid.

    Raised before any pipeline node runs; not recoverable within the pipeline.
    """


class StageContractError(PipelineError):
    """A pipeline stage returned fields it does not own."""

    def __init__(self, stage: str, fields: set[str]) -> None:
        self.stage = stage
        self.fields = fields
        super().__init__(f"Stage {stage!r} wrote fields it does not own: {sorted(fields)}")
