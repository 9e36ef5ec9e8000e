"""Application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from uiforge.api.container import get_container
from uiforge.api.dependencies import limiter
from uiforge.api.routes.generate import router as generate_router
from uiforge.infrastructure.config.model_validator import validate_models_config
from uiforge.shared.logging import setup_logging

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and check stage models on startup; release the LLM client on shutdown."""
    container = get_container()
    config = container.config
    setup_logging(
        level=config.log_level,
        file_path=config.log_file,
        rotation_max_mb=config.log_rotation_max_mb,
        rotation_backups=config.log_rotation_backups,
    )
    log.info("startup_begin", llm_provider=config.llm.provider, stage_models=dict(container.models.items()))
    # Missing models are reported, not fatal: the provider may load them on demand
    missing = await validate_models_config(container.llm, config)
    log.info("startup_complete", stages_without_model=missing)
    yield
    await container.llm.close()
    log.info("shutdown_complete")


app = FastAPI(
    title="UI Forge",
    version="0.1.0",
    description="Prompt and screenshot to HTML generation pipeline",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_container().config.security.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generate_router)


@app.get("/health")
@limiter.limit("100/minute")
async def health(request: Request) -> dict:
    """Liveness plus provider reachability and the model each stage uses."""
    container = get_container()
    return {
        "status": "ok",
        "service": "ui-forge",
        "llm_provider": container.config.llm.provider,
        "llm_available": await container.llm.is_available(),
        "models": dict(container.models.items()),
    }
