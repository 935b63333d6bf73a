"""Process configuration, read once at startup.

Only three environment variables are recognised:

    GEMINI_API_KEY  - Google AI / Gemini API key
    GEMINI_MODEL    - model name (default: gemini-2.0-flash)
    PORT            - HTTP listen port (default: 8080)

A ``.env`` file in the working directory is loaded first, without
overriding variables already present in the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class AppConfig:
    """Immutable application configuration."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    port: int = DEFAULT_PORT
    timeout_seconds: int = 30

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        load_dotenv_file: bool = True,
    ) -> "AppConfig":
        """Build the config from ``environ`` (defaults to ``os.environ``)."""
        if environ is None:
            if load_dotenv_file:
                load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        port_raw = environ.get("PORT", "").strip()
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}")

        return cls(
            api_key=environ.get("GEMINI_API_KEY", ""),
            model=environ.get("GEMINI_MODEL", "") or DEFAULT_MODEL,
            port=port,
        )
