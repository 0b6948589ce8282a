"""
Community Garden Backend — FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires settings, middleware, exception handlers and
       routers; lifespan() opens and closes the database handle.
Who:   uvicorn (uvicorn garden.main:app) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request Context (id + access log)     │
    │                                                     │
    │  Routes:                                            │
    │    GET /plots │ GET /plots/new │ GET /plots/{id}/edit│
    │    POST /plots/save │ GET /health                   │
    │                                                     │
    │  Exception Handlers:                                │
    │    PlotNotFoundError→404 │ StoreError→500 │ other→500│
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → Database(settings) → create_schema() if enabled
    Shutdown: Database.dispose() closes the pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from garden import __version__
from garden.config import Settings, settings as default_settings
from garden.database import Database
from garden.exceptions import PlotNotFoundError, StoreError
from garden.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
    request_id_var,
)
from garden.routes import health, plots
from garden.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2025-01-15T12:00:00 [INFO] garden.access: GET /plots 200 3.1ms [1f3a9c0e] from 127.0.0.1
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # DB_ECHO turns SQL logging on through create_engine(echo=True)
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings)
    logger.info("Community Garden backend %s starting up...", __version__)

    database = Database(settings)
    if settings.db_auto_create_schema:
        await database.create_schema()
    app.state.database = database

    logger.info("Server ready at http://%s:%d/plots", settings.app_host, settings.app_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Community Garden backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # request.state outlives the ContextVar reset in RequestContextMiddleware
    return getattr(request.state, "request_id", "") or request_id_var.get()


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, request_id=_request_id(request))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and a JSON ErrorResponse body.

        PlotNotFoundError → 404 Not Found
        StoreError        → 500 Internal Server Error (generic message)
        Exception         → 500 Internal Server Error (generic message)

    Driver messages and stack traces are logged, never returned.
    """

    @app.exception_handler(PlotNotFoundError)
    async def handle_not_found(request: Request, exc: PlotNotFoundError):
        return _error_response(request, 404, "not_found", exc.message)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(
            "[%s] Store error: %s | Context: %s", _request_id(request), exc.message, exc.context
        )
        return _error_response(
            request, 500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Runs in ServerErrorMiddleware, outside RequestContextMiddleware,
        so the X-Request-ID header is set here.
        """
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_response(
            request,
            500,
            "internal_server_error",
            "An unexpected error occurred.",
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit configuration (tests); defaults to the environment-loaded one

    Returns:
        FastAPI app. `app.state.database` is set by the lifespan, or directly
        by callers that manage the Database handle themselves.
    """
    app = FastAPI(
        title="Community Garden",
        description="Plot records for a community garden: list, create and edit garden beds.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or default_settings

    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(plots.router)
    app.include_router(health.router)

    return app


app = create_app()
