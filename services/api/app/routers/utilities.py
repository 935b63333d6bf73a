"""Utility service endpoints: summarize, email, explain-code, rewrite.

Handlers are plain ``def`` because the Gemini call blocks; FastAPI runs
them in its threadpool.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from core.services import ServiceDispatcher, ServiceKind
from shared.schemas import ErrorResponse, ServiceResponse

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid field"},
    502: {"model": ErrorResponse, "description": "Upstream LLM call failed"},
}


def get_dispatcher(request: Request) -> ServiceDispatcher:
    return request.app.state.dispatcher


def _run(dispatcher: ServiceDispatcher, kind: ServiceKind, body: Any) -> ServiceResponse:
    result = dispatcher.dispatch(kind, body)
    return ServiceResponse(**result.to_dict())


@router.post("/summarize", response_model=ServiceResponse, responses=_ERROR_RESPONSES)
def summarize(body: Any = Body(default=None), dispatcher: ServiceDispatcher = Depends(get_dispatcher)):
    """Summarize text into a one-liner plus bullets. Body: ``{text}``."""
    return _run(dispatcher, ServiceKind.SUMMARIZE, body)


@router.post("/email", response_model=ServiceResponse, responses=_ERROR_RESPONSES)
def email(body: Any = Body(default=None), dispatcher: ServiceDispatcher = Depends(get_dispatcher)):
    """Generate an email. Body: ``{recipientRole?, tone?, purpose?, details}``."""
    return _run(dispatcher, ServiceKind.EMAIL, body)


@router.post("/explain-code", response_model=ServiceResponse, responses=_ERROR_RESPONSES)
def explain_code(body: Any = Body(default=None), dispatcher: ServiceDispatcher = Depends(get_dispatcher)):
    """Explain a code snippet for a beginner. Body: ``{code}``."""
    return _run(dispatcher, ServiceKind.EXPLAIN_CODE, body)


@router.post("/rewrite", response_model=ServiceResponse, responses=_ERROR_RESPONSES)
def rewrite(body: Any = Body(default=None), dispatcher: ServiceDispatcher = Depends(get_dispatcher)):
    """Rewrite text in a given tone. Body: ``{text, tone}``."""
    return _run(dispatcher, ServiceKind.REWRITE, body)
