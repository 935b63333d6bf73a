"""Error taxonomy for the utility services.

``ServiceValidationError`` -> HTTP 400, raised before any upstream call.
``UpstreamError``          -> HTTP 502, the Gemini call failed.

A JSON parse failure of the model output is *not* an error: the output
degrades to the raw text (see ``normalizer``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, service: Optional[str], message: str):
        super().__init__(message)
        self.service = service
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"success": False, "service": self.service, "error": self.message}


class ServiceValidationError(ServiceError):
    """A required request field is missing or has the wrong type."""

    status_code = 400


class UpstreamError(ServiceError):
    """The upstream LLM call failed (HTTP error, timeout, network)."""

    status_code = 502

    def __init__(self, service: Optional[str], message: str, status: Optional[int] = None):
        super().__init__(service, message)
        self.status = status

    def to_payload(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"message": self.message}
        if self.status is not None:
            error["status"] = self.status
        return {"success": False, "service": self.service, "error": error}
