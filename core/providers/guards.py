"""Output guards for LLM responses.

Gemini often wraps JSON answers in a Markdown code fence even when told not
to.  ``JSONOutputGuard.decode`` strips the fence and attempts a JSON decode;
unlike a strict parser it never raises, handing back the original text when
the payload is not valid JSON.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Opening fence with an optional language tag, e.g. ```json
_OPEN_FENCE = re.compile(r"^```[A-Za-z0-9_+-]*\s*")
_CLOSE_FENCE = re.compile(r"\s*```\s*$")


class JSONOutputGuard:
    """Lenient JSON decoding of raw model text."""

    @staticmethod
    def strip_fences(raw_text: str) -> str:
        """Remove a leading ```lang fence and a trailing ``` fence."""
        text = raw_text.strip()
        text = _OPEN_FENCE.sub("", text, count=1)
        text = _CLOSE_FENCE.sub("", text, count=1)
        return text.strip()

    @staticmethod
    def decode(raw_text: str) -> Any:
        """Return the decoded JSON value, or ``raw_text`` unchanged on failure."""
        if not raw_text:
            return raw_text
        cleaned = JSONOutputGuard.strip_fences(raw_text)
        try:
            return json.loads(cleaned)
        except (json.JSONDecodeError, ValueError):
            logger.debug(
                "Model output is not valid JSON (%d chars); passing text through",
                len(raw_text),
            )
            return raw_text


def decode_model_text(raw_text: str) -> Any:
    """Module-level shortcut for ``JSONOutputGuard.decode``."""
    return JSONOutputGuard.decode(raw_text)
