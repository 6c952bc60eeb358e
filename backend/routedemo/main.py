"""
RouteDemo Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware registration, route mounting,
       error hooks and lifecycle management in one place.
How:   Factory pattern: create_app(settings, fixtures) returns a configured
       FastAPI instance. Settings and fixtures are stored on app.state and
       reach handlers through dependencies (routedemo.context).
Who:   Called by uvicorn (uvicorn routedemo.main:app) and by the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /  /hello  /blog  /feedback  /users.json           │
    │  /upload  /push  /health                            │
    │                                                     │
    │  Error hooks → Failure → rendering.render_outcome   │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ no route→404 │ wrong method→405 │ crash→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from routedemo import __version__
from routedemo.config import Settings, load_settings
from routedemo.fixtures import Fixtures, default_fixtures
from routedemo.middleware.logging import RequestLoggingMiddleware
from routedemo.middleware.request_id import RequestIDMiddleware, request_id_var
from routedemo.outcomes import ErrorKind, Failure
from routedemo.rendering import render_outcome
from routedemo.routes import blog, feedback, files, greetings, health, users
from routedemo.services.file_service import FileService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("RouteDemo Backend starting up...")

    if settings.debug:
        logger.warning("Debug mode is ON: failure details and tracebacks are sent to clients")

    storage = Path(settings.storage_root)
    storage.mkdir(parents=True, exist_ok=True)
    logger.info("Storage directory: %s", storage.resolve())
    logger.info("Blog posts loaded: %d", len(app.state.fixtures.blog_posts))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("RouteDemo Backend shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Hooks
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Convert faults raised by the framework into Failures and render them.

    Hook summary:
        StarletteHTTPException → Failure with the exception's status
                                 (404 unmatched route, 405 wrong method, ...)
        Exception (fallback)   → UNHANDLED Failure, 500

    Handlers signal their own failures by returning a Failure, so nothing in
    routedemo raises for an expected error; these hooks only see framework
    faults and bugs.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        failure = Failure.from_status(
            exc.status_code,
            message=str(exc.detail),
            headers=dict(exc.headers or {}),
        )
        return render_outcome(failure, debug=request.app.state.settings.debug)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
        """
        Catch-all for truly unexpected errors.

        Only reached with debug off: in debug mode Starlette's
        ServerErrorMiddleware answers with its traceback page instead.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        failure = Failure(
            kind=ErrorKind.UNHANDLED,
            message=f"{type(exc).__name__}: {exc}",
            context={"path": request.url.path, "method": request.method},
        )
        return render_outcome(failure, debug=False)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    fixtures: Optional[Fixtures] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted.
        fixtures: Read-only demo data; default_fixtures() when omitted.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    settings = settings or load_settings()
    fixtures = fixtures if fixtures is not None else default_fixtures()

    app = FastAPI(
        title="RouteDemo API",
        description=(
            "A tour of routing and request/response primitives: greetings, "
            "a read-only blog, a feedback form, a JSON lookup and two ways "
            "to upload a file."
        ),
        version=__version__,
        # debug=True makes Starlette render tracebacks for uncaught exceptions
        debug=settings.debug,
        # "/blog/" is a different path from "/blog": no 307 to the slashless route
        redirect_slashes=False,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.fixtures = fixtures
    app.state.file_service = FileService(
        settings.storage_root, chunk_size=settings.upload_chunk_size
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Hooks ──────────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greetings.router)
    app.include_router(blog.router)
    app.include_router(feedback.router)
    app.include_router(users.router)
    app.include_router(files.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn using the configured host/port."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "routedemo.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# Why module-level: uvicorn expects `routedemo.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
