"""Google Gemini provider.

Implements the LLMProvider interface on top of the ``google-generativeai``
SDK.  SDK and transport failures are translated into ``LLMError`` so the
caller never sees a raw Google exception.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from .base import LLMConfig, LLMError, LLMProvider, LLMResponse, LLMTimeoutError

logger = logging.getLogger(__name__)


class GoogleProvider(LLMProvider):
    """LLM Provider backed by Google Gemini API.

    The SDK model is created lazily on first use, so constructing the
    provider without an API key is allowed; the first call then fails
    with an ``LLMError`` instead.
    """

    provider_name = "google"

    def __init__(
        self,
        api_key: str = "",
        default_model: str = "gemini-2.0-flash",
        timeout_seconds: int = 30,
    ):
        self.api_key = api_key
        self.default_model = default_model
        self.timeout_seconds = timeout_seconds
        self._model = None

    @property
    def model(self):
        if self._model is None:
            if not self.api_key:
                raise LLMError("GEMINI_API_KEY is not set", provider=self.provider_name)
            try:
                import google.generativeai as genai
            except ImportError:
                raise LLMError(
                    "google-generativeai package required: pip install google-generativeai",
                    provider=self.provider_name,
                )
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.default_model)
        return self._model

    def generate_text(
        self,
        prompt: str,
        *,
        config: Optional[LLMConfig] = None,
    ) -> LLMResponse:
        cfg = self._default_config(config)
        gen_config = {
            "temperature": cfg.temperature,
            "max_output_tokens": cfg.max_tokens,
        }
        timeout = cfg.timeout_seconds or self.timeout_seconds

        t0 = time.time()
        try:
            response = self.model.generate_content(
                prompt,
                generation_config=gen_config,
                request_options={"timeout": timeout},
            )
        except LLMError:
            raise
        except Exception as e:
            raise self._translate_error(e, timeout) from e

        latency_ms = int((time.time() - t0) * 1000)
        usage = getattr(response, "usage_metadata", None)

        return LLMResponse(
            raw_text=_first_candidate_text(response),
            model=self.default_model,
            provider=self.provider_name,
            input_tokens=getattr(usage, "prompt_token_count", 0) if usage else 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) if usage else 0,
            latency_ms=latency_ms,
        )

    def _translate_error(self, exc: Exception, timeout: int) -> LLMError:
        """Map an SDK / transport exception onto the LLMError hierarchy."""
        try:
            from google.api_core import exceptions as gexc
        except ImportError:
            gexc = None

        if gexc is not None and isinstance(exc, gexc.DeadlineExceeded):
            return LLMTimeoutError(
                f"Gemini call timed out after {timeout}s",
                provider=self.provider_name,
            )
        if isinstance(exc, TimeoutError):
            return LLMTimeoutError(str(exc) or "Gemini call timed out", provider=self.provider_name)
        if gexc is not None and isinstance(exc, gexc.GoogleAPICallError):
            status = exc.code if isinstance(exc.code, int) else None
            return LLMError(exc.message or str(exc), provider=self.provider_name, status=status)
        return LLMError(str(exc) or exc.__class__.__name__, provider=self.provider_name)


def _first_candidate_text(response: Any) -> str:
    """Return the text of the first candidate, or '' when there is none.

    ``response.text`` raises ValueError when the candidate was blocked or
    carries no text parts.
    """
    try:
        return response.text or ""
    except ValueError:
        return ""
