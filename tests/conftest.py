"""Shared fixtures for the AI Utility Hub test suite.

Provides a scriptable fake LLM provider so nothing here touches the
network or needs a Gemini API key.
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.providers.base import LLMConfig, LLMProvider, LLMResponse  # noqa: E402


class FakeProvider(LLMProvider):
    """Returns a canned reply (or raises a canned error) and records calls."""

    provider_name = "fake"

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, LLMConfig]] = []

    def generate_text(self, prompt, *, config=None):
        self.calls.append((prompt, config))
        if self.error is not None:
            raise self.error
        return LLMResponse(raw_text=self.reply, model="fake-model", provider=self.provider_name, latency_ms=5)


@pytest.fixture
def make_provider():
    """Factory fixture: ``make_provider(reply=..., error=...)``."""
    return FakeProvider
