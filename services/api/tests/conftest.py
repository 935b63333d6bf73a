"""Shared fixtures for API integration tests.

Uses FastAPI TestClient (in-memory, no network) with a fake upstream
provider, so tests run without a Gemini API key.
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Never pick up a real key from the developer's shell
os.environ.pop("GEMINI_API_KEY", None)

from core.config import AppConfig  # noqa: E402
from core.providers.base import LLMProvider, LLMResponse  # noqa: E402


class StubProvider(LLMProvider):
    """Upstream stand-in: returns ``reply`` or raises ``error``."""

    provider_name = "stub"

    def __init__(self):
        self.reply = ""
        self.error = None
        self.prompts = []

    def generate_text(self, prompt, *, config=None):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(raw_text=self.reply, model="stub-model", provider=self.provider_name)


@pytest.fixture()
def upstream():
    return StubProvider()


@pytest.fixture()
def client(upstream):
    """FastAPI TestClient — no network, no server startup needed."""
    from fastapi.testclient import TestClient

    from services.api.app.main import create_app

    app = create_app(AppConfig(api_key="test-key"), provider=upstream)
    return TestClient(app)
