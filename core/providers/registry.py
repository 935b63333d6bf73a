"""LLM provider factory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import LLMProvider

if TYPE_CHECKING:
    from ..config import AppConfig

logger = logging.getLogger(__name__)


def get_provider(config: "AppConfig") -> LLMProvider:
    """Create the upstream provider described by ``config``.

    A missing API key is not fatal here: the provider is still returned and
    every call through it fails as an upstream error.
    """
    from .google_provider import GoogleProvider

    if not config.api_key:
        logger.warning("GEMINI_API_KEY not set. Set it in .env for production.")

    return GoogleProvider(
        api_key=config.api_key,
        default_model=config.model,
        timeout_seconds=config.timeout_seconds,
    )
