"""
Sword Tracker Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       the module-level `app` is what uvicorn serves.
Who:   uvicorn (`uvicorn sword_tracker.main:app`) and the test-suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐            │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │            │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘            │
    │                                                          │
    │  Routes:                                                 │
    │  /api/user  /api/elo  /api/elo-stats  /api/daily-goals   │
    │  /api/courses  /api/goals  /api/game-analyses            │
    │  /api/analyze-position  /api/download  /download  /health│
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ NotFound→404 │ Unavailable→503 │ →500  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (warn, never exit)
    3. Create tables when AUTO_CREATE_TABLES is set
    Shutdown:
    1. Dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sword_tracker import __version__
from sword_tracker.config import settings
from sword_tracker.database import create_tables, dispose_engine
from sword_tracker.exceptions import (
    AnalysisError,
    DatabaseError,
    FileStorageError,
    NotFoundError,
    StorageUnavailableError,
    SwordTrackerError,
    ValidationError,
)
from sword_tracker.middleware.logging import RequestLoggingMiddleware
from sword_tracker.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from sword_tracker.routes import (
    INVALID_PAYLOAD_MESSAGE_KEY,
    analysis,
    courses,
    daily_goals,
    download,
    elo,
    game_analyses,
    goals,
    health,
    users,
)

logger = logging.getLogger(__name__)

DEFAULT_INVALID_PAYLOAD_MESSAGE = "Invalid request data"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (Docker captures it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Sword Tracker backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # The server keeps running so /health can report the problem
        logger.warning("Configuration warning: %s", str(e))

    logger.info("Storage backend: %s", settings.storage_backend)
    if settings.storage_backend == "database" and settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Sword Tracker backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(
    error: str,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """The JSON error envelope shared by every handler."""
    body: Dict[str, Any] = {"error": error, "message": message}
    if errors is not None:
        body["errors"] = errors
    body["request_id"] = request_id_var.get("")
    return body


def sanitize_validation_errors(raw_errors) -> List[Dict[str, Any]]:
    """
    Reduce pydantic error dicts to loc/msg/type.

    `input` and `ctx` are dropped: they can echo the whole request body and
    may hold exception objects that are not JSON serializable.
    """
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in raw_errors
    ]


def invalid_payload_message(request: Request) -> str:
    """Per-route validation message declared via `openapi_extra`."""
    route = request.scope.get("route")
    extra = getattr(route, "openapi_extra", None) or {}
    return extra.get(INVALID_PAYLOAD_MESSAGE_KEY, DEFAULT_INVALID_PAYLOAD_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error envelope.

    Handler hierarchy:
        ValidationError, RequestValidationError → 400
        NotFoundError                           → 404
        StorageUnavailableError                 → 503
        AnalysisError, DatabaseError,
        FileStorageError                        → 500
        SwordTrackerError (base)                → 500
        Exception (fallback)                    → 500

    Client responses never carry stack traces, SQL or file paths; the
    exception context is logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = invalid_payload_message(request)
        errors = sanitize_validation_errors(exc.errors())
        logger.warning(
            "[%s] %s on %s %s: %d error(s)",
            request_id_var.get(""), message, request.method, request.url.path, len(errors),
        )
        return JSONResponse(status_code=400, content=error_body("validation_error", message, errors))

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=error_body("validation_error", exc.message, exc.errors),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=error_body("not_found", exc.message))

    @app.exception_handler(StorageUnavailableError)
    async def handle_storage_unavailable(request: Request, exc: StorageUnavailableError):
        logger.error(
            "[%s] Storage unavailable: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=503, content=error_body("service_unavailable", exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=500, content=error_body("server_error", "Internal server error"))

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=500, content=error_body("server_error", exc.message))

    @app.exception_handler(AnalysisError)
    async def handle_analysis_error(request: Request, exc: AnalysisError):
        logger.error(
            "[%s] Analysis error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=500, content=error_body("server_error", exc.message))

    @app.exception_handler(SwordTrackerError)
    async def handle_application_error(request: Request, exc: SwordTrackerError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(status_code=500, content=error_body("server_error", "Internal server error"))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Unknown paths (404) and wrong methods (405) raised by the router
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("http_error", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors, served by Starlette's outermost
        ServerErrorMiddleware. That layer sits outside RequestIDMiddleware,
        so the request id header is added here.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body("internal_server_error", "Internal server error"),
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble the application: middleware, exception handlers, routers."""
    app = FastAPI(
        title="Sword Tracker API",
        description=(
            "Chess learning tracker: ratings, daily goals, courses, long-term "
            "goals and saved game analyses."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Content-Disposition"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(elo.router)
    app.include_router(daily_goals.router)
    app.include_router(courses.router)
    app.include_router(goals.router)
    app.include_router(game_analyses.router)
    app.include_router(analysis.router)
    app.include_router(download.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
