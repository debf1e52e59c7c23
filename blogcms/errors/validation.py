"""Request validation errors rendered in the shared error body."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from blogcms.errors.base import error_content
from blogcms.monitoring import get_logger
from blogcms.utils.helpers import host

logger = get_logger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten FastAPI's error list into ``field``/``message``/``type`` entries."""
    formatted = []
    for error in exc.errors():
        entry: dict[str, Any] = {
            # Skip the location prefix ('query', 'body', ...)
            "field": ".".join(str(loc) for loc in error.get("loc", ())[1:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            entry["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted.append(entry)
    return formatted


async def validation_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Render query and body validation failures as ``{"status": "error", ...}``.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 422 and the per-field errors.
    """
    errors = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={**error_content(VALIDATION_FAILED_MESSAGE), "errors": errors},
    )
