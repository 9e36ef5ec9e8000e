"""Generate endpoint integration tests."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from uiforge.api.dependencies import get_config, get_generation_use_case
from uiforge.api.routes.generate import _stream_response
from uiforge.application.generation.dto import GenerationRequest, GenerationResponse, GenerationStreamEvent
from uiforge.domain.errors import ConfigurationError
from uiforge.domain.ports.config import AppConfig, PipelineConfig
from uiforge.main import app


@pytest.fixture
def use_case():
    """Mock GenerationUseCase wired into the app."""
    mock = MagicMock()
    mock.invoke = AsyncMock(
        return_value=GenerationResponse(
            final_code="<!DOCTYPE html><html></html>",
            reply="I built your card.",
            plan="PLAN",
            is_code_request=True,
        )
    )
    app.dependency_overrides[get_generation_use_case] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


async def _post(payload: dict):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.post("/generate", json=payload)


@pytest.mark.asyncio
async def test_generate_returns_result(use_case):
    resp = await _post({"user_request": "build me a pricing card"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["final_code"].startswith("<!DOCTYPE html>")
    assert data["reply"] == "I built your card."
    assert data["is_code_request"] is True
    request = use_case.invoke.call_args.args[0]
    assert request.user_request == "build me a pricing card"


@pytest.mark.asyncio
async def test_empty_request_rejected(use_case):
    resp = await _post({"user_request": ""})
    assert resp.status_code == 422
    use_case.invoke.assert_not_called()


@pytest.mark.asyncio
async def test_screenshot_only_request_accepted(use_case):
    resp = await _post({"user_request": "", "image_url": "data:image/png;base64,iVBORw0KGgo="})

    assert resp.status_code == 200
    request = use_case.invoke.call_args.args[0]
    assert request.user_request == ""
    assert request.image_url.startswith("data:image/png")


@pytest.mark.asyncio
async def test_missing_credentials_is_503(use_case):
    use_case.invoke.side_effect = ConfigurationError("no token")
    resp = await _post({"user_request": "build me a navbar"})
    assert resp.status_code == 503


@pytest.mark.asyncio
async def test_upstream_failure_is_502(use_case):
    use_case.invoke.side_effect = RuntimeError("upstream down")
    resp = await _post({"user_request": "build me a navbar"})
    assert resp.status_code == 502


@pytest.mark.asyncio
async def test_timeout_is_504(use_case):
    async def slow(_request):
        await asyncio.sleep(5)

    use_case.invoke.side_effect = slow
    app.dependency_overrides[get_config] = lambda: AppConfig(pipeline=PipelineConfig(invocation_timeout=0.05))

    resp = await _post({"user_request": "build me a navbar"})
    assert resp.status_code == 504


async def _drain_stream(use_case, timeout: float) -> list[dict]:
    resp = _stream_response(GenerationRequest(user_request="build me a navbar"), use_case, timeout)
    return [event async for event in resp.body_iterator]


@pytest.mark.asyncio
async def test_stream_passes_events_then_closes(use_case):
    async def events(_request):
        yield GenerationStreamEvent(event_type="stage", stage="planner", payload={"plan": "PLAN"})
        yield GenerationStreamEvent(event_type="done", payload={"final_code": ""})

    use_case.invoke_stream = events

    sent = await _drain_stream(use_case, timeout=5)
    assert [e["event"] for e in sent] == ["stage", "done", "close"]


@pytest.mark.asyncio
async def test_stream_timeout_emits_single_error(use_case):
    async def slow(_request):
        yield GenerationStreamEvent(event_type="stage", stage="classifier", payload={})
        await asyncio.sleep(5)
        yield GenerationStreamEvent(event_type="done", payload={})

    use_case.invoke_stream = slow

    sent = await _drain_stream(use_case, timeout=0.05)
    assert [e["event"] for e in sent] == ["stage", "error", "close"]
    assert json.loads(sent[1]["data"])["payload"] == {"error": "TimeoutError"}
