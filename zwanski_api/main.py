"""
Zwanski API: FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn zwanski_api.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────┐   ┌──────────┐   ┌──────────────────┐     │
    │  │  Req ID  │ → │ Logging  │ → │ Security headers │     │
    │  └──────────┘   └──────────┘   └──────────────────┘     │
    │                                                         │
    │  Routes:                                                │
    │  /api/{quote,passgen,hash,lorem}                        │
    │  /api/{ip,geo,timezone,fingerprint}                     │
    │  /api/{score,device}   /api/{ping,crypto}   /           │
    │                                                         │
    │  Exception Handlers:                                    │
    │  ┌───────────────────────────────────────────────────┐  │
    │  │ MissingParameter→400 │ Upstream→503 │ Route→404   │  │
    │  └───────────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the bind address
    Shutdown: log shutdown (no pooled resources to release)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from zwanski_api import __version__
from zwanski_api.config import settings
from zwanski_api.exceptions import MissingParameterError, UpstreamServiceError, ZwanskiError
from zwanski_api.middleware.logging import RequestLoggingMiddleware
from zwanski_api.middleware.request_id import RequestIDMiddleware, request_id_var
from zwanski_api.middleware.security_headers import (
    SecurityHeadersMiddleware,
    apply_security_headers,
)
from zwanski_api.routes import analysis, client, lookups, site, tools

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "Not found", "message": "Endpoint does not exist"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level:  settings.log_level
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Per-request lines come from zwanski.access instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Zwanski API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    if settings.enable_docs:
        logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("Upstream timeout: %.1fs", settings.upstream_timeout)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Zwanski API shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        MissingParameterError     → 400 {error, message}
        UpstreamServiceError      → 503 {<target>, error, message}
        HTTPException 404 / 405   → 404 fixed "Not found" body
        HTTPException (other)     → its status, {error, message}
        ZwanskiError (base)       → 500
        Exception (fallback)      → 500, stack trace logged server-side only

    The first five run inside the middleware stack and get the security
    headers from SecurityHeadersMiddleware. The Exception fallback runs in
    Starlette's outermost ServerErrorMiddleware, so it applies them itself.
    """

    @app.exception_handler(MissingParameterError)
    async def handle_missing_parameter(request: Request, exc: MissingParameterError):
        """Client left out a required query parameter."""
        rid = request_id_var.get("")
        logger.warning("[%s] Missing parameter on %s: %s", rid, request.url.path, exc.parameter)
        return JSONResponse(
            status_code=400,
            content={"error": exc.error, "message": exc.message},
        )

    @app.exception_handler(UpstreamServiceError)
    async def handle_upstream_error(request: Request, exc: UpstreamServiceError):
        """The single outbound call of the handler failed; no retry."""
        rid = request_id_var.get("")
        logger.error("[%s] Upstream error on %s: %s", rid, request.url.path, exc.message)
        return JSONResponse(status_code=503, content=exc.to_body())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Unknown path or unsupported method.

        Routing is an exact (method, path) match, so a known path with the
        wrong method is a plain "Not found" too.
        """
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ZwanskiError)
    async def handle_app_error(request: Request, exc: ZwanskiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 body, full stack trace in the server log."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        response = JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
            },
        )
        return apply_security_headers(response)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.

    Routing notes:
        - redirect_slashes=False: `/api/quote/` is a 404, not a redirect
        - docs/redoc/openapi are off unless settings.enable_docs is set
    """
    docs_enabled = settings.enable_docs
    app = FastAPI(
        title="Zwanski API",
        description=(
            "Stateless utility endpoints: quotes, passwords, hashing, lorem ipsum, "
            "client reflection, simulated site scoring, device lookup, uptime ping "
            "and crypto prices."
        ),
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → SecurityHeaders → route

    # CORS + security headers on every response, errors included
    app.add_middleware(SecurityHeadersMiddleware)

    # Request logging: method, path, status, duration
    app.add_middleware(RequestLoggingMiddleware)

    # Request ID: first to execute = last added
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(tools.router)
    app.include_router(client.router)
    app.include_router(analysis.router)
    app.include_router(lookups.router)
    app.include_router(site.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    uvicorn.run(
        "zwanski_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `zwanski_api.main:app` to be importable
app = create_app()
