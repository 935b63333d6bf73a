"""Service catalog: the closed set of utility services and their requests.

Each service kind has one immutable request model.  ``parse_request`` turns
an untrusted JSON body into the right model, enforcing required fields
before anything is sent upstream.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ServiceValidationError

ECHO_LIMIT = 500


class ServiceKind(str, Enum):
    SUMMARIZE = "summarize"
    EMAIL = "email"
    EXPLAIN_CODE = "explain-code"
    REWRITE = "rewrite"


class ServiceRequest(BaseModel):
    """Base for per-service request models.

    Required fields are declared ``Optional`` so that a missing value can be
    reported as a 400 with our own message instead of a schema error.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    kind: ClassVar[ServiceKind]
    required_fields: ClassVar[Tuple[str, ...]] = ()

    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(f for f in self.required_fields if not getattr(self, f))

    def echo(self) -> Dict[str, Any]:
        """Input echoed back in the response envelope."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SummarizeRequest(ServiceRequest):
    kind: ClassVar[ServiceKind] = ServiceKind.SUMMARIZE
    required_fields: ClassVar[Tuple[str, ...]] = ("text",)

    text: Optional[str] = None


class EmailRequest(ServiceRequest):
    kind: ClassVar[ServiceKind] = ServiceKind.EMAIL
    required_fields: ClassVar[Tuple[str, ...]] = ("details",)

    recipient_role: Optional[str] = Field(default=None, alias="recipientRole")
    tone: Optional[str] = None
    purpose: Optional[str] = None
    details: Optional[str] = None


class ExplainCodeRequest(ServiceRequest):
    kind: ClassVar[ServiceKind] = ServiceKind.EXPLAIN_CODE
    required_fields: ClassVar[Tuple[str, ...]] = ("code",)

    code: Optional[str] = None

    def echo(self) -> Dict[str, Any]:
        code = self.code or ""
        if len(code) > ECHO_LIMIT:
            code = code[:ECHO_LIMIT] + "...[truncated]"
        return {"code": code}


class RewriteRequest(ServiceRequest):
    kind: ClassVar[ServiceKind] = ServiceKind.REWRITE
    required_fields: ClassVar[Tuple[str, ...]] = ("text", "tone")

    text: Optional[str] = None
    tone: Optional[str] = None

    def echo(self) -> Dict[str, Any]:
        return {"tone": self.tone, "text": (self.text or "")[:ECHO_LIMIT]}


REQUEST_MODELS: Dict[ServiceKind, Type[ServiceRequest]] = {
    ServiceKind.SUMMARIZE: SummarizeRequest,
    ServiceKind.EMAIL: EmailRequest,
    ServiceKind.EXPLAIN_CODE: ExplainCodeRequest,
    ServiceKind.REWRITE: RewriteRequest,
}


def parse_request(kind: ServiceKind, body: Any) -> ServiceRequest:
    """Validate a JSON body for ``kind``.

    Raises
    ------
    ServiceValidationError
        If the body is not an object, a field is not a string, or a
        required field is absent/empty.
    """
    kind = ServiceKind(kind)
    model = REQUEST_MODELS[kind]

    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise ServiceValidationError(kind.value, "request body must be a JSON object")

    try:
        request = model.model_validate(dict(body))
    except ValidationError as e:
        loc = e.errors()[0].get("loc") or ("body",)
        raise ServiceValidationError(kind.value, f"{loc[0]} must be a string")

    missing = request.missing_fields()
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        raise ServiceValidationError(kind.value, f"{' and '.join(missing)} {verb} required")
    return request
