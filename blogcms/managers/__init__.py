from blogcms.managers.rate_limiter import limiter, rate_limit_exceeded_handler
from blogcms.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "create_access_token",
    "decode_access_token",
    "limiter",
    "rate_limit_exceeded_handler",
]
