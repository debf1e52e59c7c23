"""
Middleware components for the blog posts backend.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan handler that prepares the database on
startup and releases it on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blogcms.configs import settings
from blogcms.db import close_db, init_db
from blogcms.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from blogcms.utils.helpers import host

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown."""
    configure_logging()
    logger.info(f"Starting {app.title}...")

    try:
        await init_db()
        logger.info(
            "Services initialized successfully",
            environment=settings.ENVIRONMENT,
            storage=settings.STORAGE_PROVIDER,
        )
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await close_db()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log each request with its status and timing under a request id."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        logger.info("Request", method=request.method, path=request.url.path, ip=host(request))
        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                "Response",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration=f"{duration:.3f}s",
            )
        finally:
            clear_context()

        response.headers["X-Request-ID"] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
