"""Response envelopes for the utility service API."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

__all__ = ["ServiceResponse", "UpstreamErrorDetail", "ErrorResponse", "HealthResponse"]


class ServiceResponse(BaseModel):
    """Successful service call."""

    success: Literal[True] = True
    service: str
    input: Dict[str, Any] = Field(default_factory=dict)
    output: str = ""
    data: Any = None


class UpstreamErrorDetail(BaseModel):
    message: str
    status: Optional[int] = None


class ErrorResponse(BaseModel):
    """Validation (400) or upstream (502) failure."""

    success: Literal[False] = False
    service: Optional[str] = None
    error: Union[str, UpstreamErrorDetail]


class HealthResponse(BaseModel):
    success: bool = True
    uptime: float
