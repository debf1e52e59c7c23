"""Rate limiter configuration using slowapi."""

from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from blogcms.configs import LimiterConfig, settings
from blogcms.errors.base import error_content
from blogcms.monitoring import get_logger

logger = get_logger(__name__)


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Uses API key from header if available, otherwise falls back to IP address.

    Args:
        request: FastAPI request object.

    Returns:
        Unique identifier string.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    **LimiterConfig().model_dump(),
    key_func=get_identifier,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle rate limit exceeded exceptions.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        JSON response with error details.
    """
    http_exc = cast(RateLimitExceeded, exc)
    response = _rate_limit_exceeded_handler(request, http_exc)
    logger.warning("Rate limit exceeded", path=request.url.path, limit=str(http_exc.detail))
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={
            **error_content("Rate limit exceeded"),
            "retry_after": f"{response.headers.get('retry-after', '60')} seconds",
        },
    )
