"""Request dispatcher: prompt -> Gemini -> decode -> normalize.

One call per request, no retries, no shared state between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..providers.base import LLMConfig, LLMError, LLMProvider
from ..providers.guards import decode_model_text
from .catalog import ServiceKind, ServiceRequest, parse_request
from .errors import UpstreamError
from .normalizer import normalize
from .prompts import GENERATION_SETTINGS, build_prompt

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Successful outcome of one service call."""

    service: ServiceKind
    input: Dict[str, Any]
    data: Any
    output: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "service": self.service.value,
            "input": self.input,
            "output": self.output,
            "data": self.data,
        }


class ServiceDispatcher:
    """Runs a utility service against an injected LLM provider."""

    def __init__(self, provider: LLMProvider, *, model: str = "", timeout_seconds: int = 30):
        self.provider = provider
        self.model = model
        self.timeout_seconds = timeout_seconds

    def dispatch(self, kind: ServiceKind, body: Any) -> ServiceResult:
        """Validate ``body`` for ``kind`` and run the service."""
        return self.run(parse_request(kind, body))

    def run(self, request: ServiceRequest) -> ServiceResult:
        kind = request.kind
        settings = GENERATION_SETTINGS[kind]
        config = LLMConfig(
            model=self.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout_seconds=self.timeout_seconds,
        )

        try:
            response = self.provider.generate_text(build_prompt(request), config=config)
        except LLMError as e:
            logger.warning("Upstream call failed for %s: %s (status=%s)", kind.value, e.message, e.status)
            raise UpstreamError(kind.value, e.message, status=e.status) from e
        except Exception as e:
            logger.error("Unexpected error calling upstream for %s: %s", kind.value, e, exc_info=True)
            raise UpstreamError(kind.value, str(e) or e.__class__.__name__) from e

        data = decode_model_text(response.raw_text)
        logger.info(
            "Service %s completed: model=%s latency=%dms structured=%s",
            kind.value,
            response.model or self.model,
            response.latency_ms,
            not isinstance(data, str),
        )
        return ServiceResult(
            service=kind,
            input=request.echo(),
            data=data,
            output=normalize(data, kind),
        )
