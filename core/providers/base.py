"""LLM Provider interface — abstract base for the upstream model backend.

Every provider must implement ``generate_text``.  The dispatcher receives a
provider via dependency injection, so tests can swap in a fake without
touching the network.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LLMConfig:
    """Immutable configuration for a single LLM call."""

    model: str = "gemini-2.0-flash"
    temperature: float = 0.2
    max_tokens: int = 512
    timeout_seconds: int = 30


@dataclass
class LLMResponse:
    """Standardised response from any LLM provider."""

    raw_text: str
    model: str = ""
    provider: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0


class LLMProvider(abc.ABC):
    """Abstract base class for LLM providers.

    Subclasses must implement ``generate_text``: send a prompt, receive the
    first candidate's text.
    """

    provider_name: str = "base"

    @abc.abstractmethod
    def generate_text(
        self,
        prompt: str,
        *,
        config: Optional[LLMConfig] = None,
    ) -> LLMResponse:
        """Send a prompt and return the raw model text.

        Parameters
        ----------
        prompt : str
            Full natural-language instruction, including the user input.
        config : LLMConfig, optional
            Override default config for this call.

        Returns
        -------
        LLMResponse
            Contains ``raw_text`` and usage metadata.

        Raises
        ------
        LLMError
            On API failure or missing credentials.
        LLMTimeoutError
            When the call exceeds ``config.timeout_seconds``.
        """
        ...

    def _default_config(self, config: Optional[LLMConfig]) -> LLMConfig:
        return config or LLMConfig()


class LLMError(Exception):
    """Base exception for LLM provider errors.

    ``status`` carries the upstream HTTP status code when the API answered
    with an error; it is ``None`` for network failures and local problems.
    """

    def __init__(self, message: str, provider: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status = status


class LLMTimeoutError(LLMError):
    """LLM call exceeded timeout."""

    def __init__(self, message: str, provider: str = ""):
        super().__init__(message, provider=provider, status=None)
