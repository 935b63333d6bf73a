"""LLM Provider abstraction layer.

A single upstream backend (Google Gemini) behind a small provider
interface, plus the lenient JSON guard applied to its output.
"""

from .base import LLMConfig, LLMError, LLMProvider, LLMResponse, LLMTimeoutError
from .google_provider import GoogleProvider
from .guards import JSONOutputGuard, decode_model_text
from .registry import get_provider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "LLMConfig",
    "LLMError",
    "LLMTimeoutError",
    "GoogleProvider",
    "JSONOutputGuard",
    "decode_model_text",
    "get_provider",
]
