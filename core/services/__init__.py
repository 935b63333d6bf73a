"""Utility services: catalog, prompts, output normalization, dispatch."""

from .catalog import ServiceKind, ServiceRequest, parse_request
from .dispatcher import ServiceDispatcher, ServiceResult
from .errors import ServiceError, ServiceValidationError, UpstreamError
from .normalizer import normalize

__all__ = [
    "ServiceKind",
    "ServiceRequest",
    "parse_request",
    "ServiceDispatcher",
    "ServiceResult",
    "ServiceError",
    "ServiceValidationError",
    "UpstreamError",
    "normalize",
]
