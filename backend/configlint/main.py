"""configlint — deployment config linting service.

Main FastAPI application with lifespan logging, CORS, request logging, API
key auth on the lint endpoint, and global error handling.
"""

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from configlint.api.router import api_router
from configlint.config import APP_VERSION, Settings, get_settings
from configlint.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = app.state.settings

    logger.info("server_starting", port=settings.PORT, debug=settings.DEBUG)
    if not settings.api_keys:
        logger.warning("security_alert", message="no API keys configured; service is unprotected")

    yield

    logger.info("server_stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Tests pass their own Settings."""
    settings = settings or get_settings()
    configure_logging(debug=settings.DEBUG, level=settings.LOG_LEVEL)

    app = FastAPI(
        title="configlint",
        description="Line-accurate linting for deployment configuration files.",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # ── Middleware ──

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-API-Key", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            ip=request.client.host if request.client else "unknown",
        )
        return response

    # ── Exception Handlers ──

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrong field types."""
        logger.warning("bad_request", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all error handler for unhandled exceptions."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    # ── Routes ──

    app.include_router(api_router, prefix="/api/v1")
    # Unversioned paths used by the bundled web UI
    app.include_router(api_router, include_in_schema=False)

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        logger.info("static_files_enabled", directory=str(static_dir))
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("static_files_disabled", reason="directory not found", path=str(static_dir))

        @app.get("/")
        async def root():
            """Root endpoint — API info."""
            return {
                "name": "configlint",
                "version": APP_VERSION,
                "lint": "/api/v1/lint",
                "docs": "/docs",
                "health": "/api/v1/health",
            }

    return app


app = create_app()
