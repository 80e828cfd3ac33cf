"""
Chirpy Backend — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn chirpy.main:app) or the `chirpy` script.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌────────────────────┐        │
    │  │  Req ID  │→│ Logging  │→│ Fileserver Hits    │        │
    │  └──────────┘ └──────────┘ └────────────────────┘        │
    │                                                          │
    │  Routes:                                                 │
    │  GET  /api/healthz        POST /api/validate_chirp       │
    │  POST /api/users          GET  /admin/metrics            │
    │  POST /admin/reset        /app/*  (static files)         │
    │                                                          │
    │  Exception Handlers (plain-text bodies):                 │
    │  Decode→400 │ TooLong→400 │ Forbidden→403 │ DB/Tmpl→500  │
    └──────────────────────────────────────────────────────────┘

Per-app state:
    app.state.settings     Settings used by handlers (dev guard, template)
    app.state.hit_counter  HitCounter shared by the middleware and admin routes
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from chirpy import __version__
from chirpy.config import Settings, settings
from chirpy.database import dispose_engine
from chirpy.exceptions import (
    ChirpyError,
    ForbiddenError,
    PersistenceError,
    RequestDecodeError,
    TemplateReadError,
    ValidationError,
)
from chirpy.middleware.hits import FileserverHitsMiddleware
from chirpy.middleware.logging import AccessLogMiddleware
from chirpy.middleware.request_id import RequestIDMiddleware, request_id_var
from chirpy.routes import admin, chirps, health, users
from chirpy.services.hit_counter import HitCounter

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/app"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout, where the container runtime collects it.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  logging, configuration check, static root check.
    Shutdown: dispose the database engine.
    """
    app_settings: Settings = app.state.settings

    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Chirpy Backend starting up...")

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: the health check and validator work without a DB
        logger.error("Configuration error: %s", str(e))

    static_root = Path(app_settings.filepath_root)
    if not static_root.is_dir():
        logger.warning("Static root %s does not exist; /app/ requests will fail", static_root)
    else:
        logger.info("Serving %s under %s/", static_root.resolve(), STATIC_PREFIX)

    if app_settings.is_dev:
        logger.warning("PLATFORM=dev: POST /admin/reset is enabled")

    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )
    logger.info("=" * 60)

    yield

    logger.info("Chirpy Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _plain_error(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(
        message,
        status_code=status_code,
        headers={"X-Request-ID": request_id_var.get("")},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to plain-text error responses.

    Handler hierarchy:
        RequestValidationError  → 400 "Invalid request body"
        RequestDecodeError      → 400 "Invalid request body" (raw body not decodable)
        ValidationError         → 400 (ChirpTooLongError: "Chirp is too long")
        ForbiddenError          → 403
        PersistenceError        → 500 (fixed message; driver details logged only)
        TemplateReadError       → 500 "Internal Server Error"
        ChirpyError (base)      → its status_code
        Exception (fallback)    → 500

    Security: responses never contain stack traces, SQL or file paths.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_decode_failure(request: Request, exc: RequestValidationError):
        """FastAPI rejected a parameter it validates itself."""
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request body: %d error(s)", rid, len(exc.errors()))
        return _plain_error(400, RequestDecodeError().message)

    @app.exception_handler(RequestDecodeError)
    async def handle_request_decode_error(request: Request, exc: RequestDecodeError):
        """The POST routes could not decode the raw body into their schema."""
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request body | Context: %s", rid, exc.context)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        rid = request_id_var.get("")
        logger.warning("[%s] Forbidden: %s", rid, exc.message)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        rid = request_id_var.get("")
        logger.error("[%s] Persistence error: %s | Context: %s", rid, exc.message, exc.context)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(TemplateReadError)
    async def handle_template_error(request: Request, exc: TemplateReadError):
        rid = request_id_var.get("")
        logger.error("[%s] Template error | Context: %s", rid, exc.context)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(ChirpyError)
    async def handle_chirpy_error(request: Request, exc: ChirpyError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return _plain_error(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _plain_error(500, "Internal Server Error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings for this instance. Defaults to the module
            singleton loaded from the environment; tests pass their own.

    Each call builds a fresh HitCounter, so two apps never share a count.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Chirpy API",
        description="Chirp validation, users and fileserver metrics.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.hit_counter = HitCounter()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → FileserverHits
    app.add_middleware(
        FileserverHitsMiddleware,
        counter=app.state.hit_counter,
        prefix=STATIC_PREFIX,
    )
    app.add_middleware(
        AccessLogMiddleware,
        counter=app.state.hit_counter,
        static_prefix=STATIC_PREFIX,
    )
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(chirps.router)
    app.include_router(users.router)
    app.include_router(admin.router)

    # check_dir=False: a missing root is reported at startup instead of
    # failing the import
    app.mount(
        STATIC_PREFIX,
        StaticFiles(directory=app_settings.filepath_root, html=True, check_dir=False),
        name="static",
    )

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the default app with uvicorn."""
    uvicorn.run(
        "chirpy.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
