"""Blog Posts Backend - public post listing and authenticated post management."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from blogcms.configs import settings
from blogcms.dependencies import SessionDep
from blogcms.errors import (
    DatabaseError,
    PostError,
    UploadError,
    database_exception_handler,
    post_exception_handler,
    upload_exception_handler,
    validation_exception_handler,
)
from blogcms.managers import limiter, rate_limit_exceeded_handler
from blogcms.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogcms.monitoring import get_logger
from blogcms.repositories.base import STORE_EXCEPTIONS
from blogcms.routes import posts_router
from blogcms.schemas import HealthCheckResponse
from blogcms.utils.helpers import today_str

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog posts API: published listing plus create, update and delete",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(posts_router)

if settings.STORAGE_PROVIDER == "local":
    app.mount(
        settings.UPLOADS_BASE_URL,
        StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
        name="uploads",
    )

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
    (PostError, post_exception_handler),
    (DatabaseError, database_exception_handler),
    (UploadError, upload_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 00:00:00",
                        "database": "ok",
                        "storage": "local",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request, session: SessionDep) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.
    session : AsyncSession
        Database session used for a connectivity probe.

    Returns
    -------
    ORJSONResponse
        ``status`` is ``"ok"`` when the database answers, ``"degraded"``
        otherwise.
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except STORE_EXCEPTIONS:
        logger.exception("Health check database probe failed")
        database = "unavailable"

    response = HealthCheckResponse(
        version=app.version,
        status="ok" if database == "ok" else "degraded",
        timestamp=today_str(),
        database=database,
        storage=settings.STORAGE_PROVIDER,
    )
    return ORJSONResponse(response.model_dump())


if __name__ == "__main__":
    from uvicorn import run

    run("blogcms.main:app", host="127.0.0.1", port=8000, log_level="info", reload=True)
