"""FastAPI application.

No module-level app is built; run with `gophertalk serve` or
`uvicorn --factory gophertalk.api.main:create_app`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gophertalk import __version__
from gophertalk.api.middleware import JSONContentTypeMiddleware
from gophertalk.api.routes import router
from gophertalk.config import Settings, validate_port
from gophertalk.history import TranslationHistory
from gophertalk.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    history: Optional[TranslationHistory] = None,
) -> FastAPI:
    """Create the Gopher Talk FastAPI application.

    Args:
        settings: Application settings (default: Settings())
        history: History to record into (default: a new one owned by the app)

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    owns_history = history is None
    history = history or TranslationHistory(workers=settings.history_workers)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Gopher Talk {__version__} started")

        yield

        if owns_history:
            app.state.history.close()
        logger.info("Gopher Talk stopped")

    app = FastAPI(
        title="Gopher Talk",
        description="Translates English words and sentences to gopher",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.history = history
    app.state.settings = settings

    app.add_middleware(JSONContentTypeMiddleware)

    @app.exception_handler(RequestValidationError)
    async def malformed_body_handler(request: Request, exc: RequestValidationError):
        """Malformed or mistyped JSON bodies are client errors."""
        logger.info(f"Rejected {request.url.path}: malformed body")
        return JSONResponse(
            status_code=400,
            content={"detail": "Malformed request body"},
        )

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Gopher Talk",
            "version": __version__,
            "endpoints": ["/word", "/sentence", "/history"],
            "docs": "/docs",
        }

    return app


def run_server(settings: Optional[Settings] = None) -> None:
    """Run the HTTP server until interrupted.

    Raises:
        ValueError: If the configured port is out of range
    """
    import uvicorn

    settings = settings or Settings()
    port = validate_port(settings.port)

    setup_logging(settings.log_level)
    app = create_app(settings)

    logger.info(f"Listening on http://{settings.host}:{port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=port,
        log_level=settings.log_level,
        timeout_keep_alive=settings.timeout_seconds,
    )
