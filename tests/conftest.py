"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from uiforge.domain.ports.config import ModelConfig
from uiforge.domain.ports.llm import LLMResponse

VALID_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-[#0f172a]">
  <div class="mx-auto max-w-sm p-6 rounded-2xl bg-[#1e293b]">
    <h2 class="text-[#f8fafc] text-xl font-semibold">Pro Plan</h2>
    <p class="text-[#94a3b8]">$29 per month, billed annually</p>
  </div>
</body>
</html>"""


@pytest.fixture
def valid_html() -> str:
    """A complete document comfortably above the reviewer's skip threshold."""
    return VALID_HTML


@pytest.fixture
def make_llm():
    """Factory: mock LLM port whose generate() returns the given contents in order."""

    def _make(*contents: str):
        llm = MagicMock()
        llm.ensure_credentials = MagicMock()
        llm.generate = AsyncMock(
            side_effect=[LLMResponse(content=c, model="test-model") for c in contents]
        )
        return llm

    return _make


@pytest.fixture
def models():
    """Same test model for every stage."""
    return ModelConfig(default="test-model").get_models_for_provider("openai_compatible")
