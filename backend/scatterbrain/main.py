"""
Scatter-Brain Backend — FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own ThoughtService and store.
Who:   uvicorn (scatterbrain.main:app), the CLI entry point, and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐             │
    │  │  Req ID  │→│ Logging  │→│   CORS   │             │
    │  └──────────┘ └──────────┘ └──────────┘             │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────┐ ┌──────────────────────────────────┐ │
    │  │ GET /ping │ │ POST/GET /thoughts, GET/PUT /{id}│ │
    │  └───────────┘ └──────────────────────────────────┘ │
    │  Mount "/" → StaticFiles(static_root)   (fallback)  │
    │                                                     │
    │  Exception Handlers:                                │
    │  BadRequest→400 │ NotFound→404 │ everything else→500│
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from scatterbrain import __version__
from scatterbrain.config import settings
from scatterbrain.exceptions import BadRequestError, NotFoundError, ScatterBrainError
from scatterbrain.middleware.logging import RequestLoggingMiddleware
from scatterbrain.middleware.request_id import RequestIDMiddleware, request_id_var
from scatterbrain.routes import ping, thoughts
from scatterbrain.services.thought_service import ThoughtService
from scatterbrain.store import InMemoryThoughtStore, ThoughtStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] scatterbrain.access: GET /api/thoughts 200 0.4ms [a1b2c3d4] from 127.0.0.1
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and static directory. Shutdown: report discarded thoughts."""
    setup_logging()
    logger.info("Scatter-Brain starting up...")

    static_root = Path(settings.static_root)
    static_root.mkdir(parents=True, exist_ok=True)
    logger.info("Static directory: %s", static_root.resolve())
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    store: ThoughtStore = app.state.thought_service.store
    logger.info("Scatter-Brain shutting down; discarding %d thoughts.", len(store))


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the ErrorResponse body.

    Handler hierarchy:
        BadRequestError         → 400 (includes MalformedIdentifierError)
        NotFoundError           → 404
        ScatterBrainError       → 500
        Exception               → 500, traceback logged, generic message
    """

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(request: Request, exc: BadRequestError):
        logger.warning(
            "[%s] Bad request: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return _error_response(400, "bad_request", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(ScatterBrainError)
    async def handle_app_error(request: Request, exc: ScatterBrainError):
        logger.error(
            "[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return _error_response(500, "internal_server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return _error_response(
            500, "internal_server_error", "An unexpected error occurred. Please try again."
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[ThoughtStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Thought store to serve from. Defaults to a fresh
               InMemoryThoughtStore, so every app starts empty.
    """
    app = FastAPI(
        title="Scatter-Brain API",
        description="Jot down short thoughts and come back to them later.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.thought_service = ThoughtService(store if store is not None else InMemoryThoughtStore())

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(ping.router)
    app.include_router(thoughts.router)

    # Must be mounted last: "/" matches every path the API routes did not.
    app.mount(
        "/",
        StaticFiles(directory=settings.static_root, html=True, check_dir=False),
        name="static",
    )

    return app


app = create_app()
