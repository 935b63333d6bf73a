"""FastAPI application — AI Utility Hub API.

Stateless proxy in front of Google Gemini.  The browser frontend calls
these endpoints so the API key never leaves the server.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import __version__
from core.config import AppConfig
from core.providers import LLMProvider, get_provider
from core.services import ServiceDispatcher, ServiceError, ServiceKind
from shared.schemas import HealthResponse

from .routers import utilities

logger = logging.getLogger(__name__)


def _service_from_path(path: str) -> Optional[str]:
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return name if name in {k.value for k in ServiceKind} else None


def create_app(
    config: Optional[AppConfig] = None,
    provider: Optional[LLMProvider] = None,
) -> FastAPI:
    """Build the API.  ``provider`` overrides the Gemini provider (tests)."""
    config = config or AppConfig.from_env()
    provider = provider or get_provider(config)

    app = FastAPI(
        title="AI Utility Hub API",
        version=__version__,
        description="Summarize, email, explain-code and rewrite utilities backed by Gemini",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.config = config
    app.state.dispatcher = ServiceDispatcher(
        provider,
        model=config.model,
        timeout_seconds=config.timeout_seconds,
    )
    app.state.started_at = time.monotonic()

    # -----------------------------------------------------------------------
    # CORS
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Error envelopes
    # -----------------------------------------------------------------------
    @app.exception_handler(ServiceError)
    async def _service_error(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "service": _service_from_path(request.url.path),
                "error": "request body must be valid JSON",
            },
        )

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(utilities.router, prefix="/api", tags=["utilities"])

    # -----------------------------------------------------------------------
    # Health Check
    # -----------------------------------------------------------------------
    @app.get("/api/health", response_model=HealthResponse)
    async def health(request: Request):
        return HealthResponse(uptime=round(time.monotonic() - request.app.state.started_at, 3))

    @app.get("/")
    async def root():
        return {"message": "AI Utility Hub API", "docs": "/docs"}

    logger.info("API ready: model=%s port=%d", config.model, config.port)
    return app


app = create_app()
