"""
Observability helpers for the blog posts backend.

Usage
-----
>>> from blogcms.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from blogcms.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
]
