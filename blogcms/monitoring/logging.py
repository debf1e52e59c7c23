"""
Structured logging with PII sanitization.

This module provides structured logging using structlog with:
- JSON output outside development
- Pretty console output for development
- Automatic PII redaction in log events
- Request ID correlation

Examples
--------
>>> from blogcms.monitoring import get_logger
>>> logger = get_logger("my_module")
>>> logger.info("Post created", post_id="123")
"""

from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from re import Pattern
from re import compile as re_compile
from typing import Any

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from blogcms.configs.settings import settings
from blogcms.utils.helpers import today_str

# Sensitive headers to redact
SENSITIVE_HEADERS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "x-api-key",
        "proxy-authorization",
    },
)

# Order matters: more specific patterns come first
PII_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Remove control characters from log messages.

    Examples
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return str(message).translate(CONTROL_CHARS)


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """Return headers with sensitive values redacted."""
    return {k: "[REDACTED]" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def redact_pii(message: str) -> str:
    """
    Redact PII patterns from log messages.

    Examples
    --------
    >>> redact_pii("User user@example.com logged in")
    'User [REDACTED_EMAIL] logged in'
    """
    for pattern, replacement in PII_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Sanitize the event dictionary for PII and injection.

    Args:
        logger: The wrapped logger instance.
        method_name: The name of the logging method being called.
        event_dict: The event dictionary being built.

    Returns:
        Sanitized event dictionary.
    """
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_pii(sanitize_log_message(value))
        elif key.lower() == "headers" and isinstance(value, dict):
            event_dict[key] = sanitize_headers(value)

    return event_dict


def get_processors(*, colors: bool = True) -> list[Processor]:
    """
    Get the list of structlog processors based on environment.

    Args:
        colors: Whether to enable colors in ConsoleRenderer.

    Returns:
        List of processors for structlog configuration.
    """
    processors: list[Processor] = [
        filter_by_level,
        merge_contextvars,
        add_log_level,
        add_timestamp,
        sanitize_event_dict,
        ExtraAdder(),
    ]

    if settings.ENVIRONMENT == "development":
        processors.append(
            ConsoleRenderer(
                colors=colors,
                pad_level=False,
                exception_formatter=RichTracebackFormatter(),
            ),
        )
    else:
        processors.append(JSONRenderer())

    return processors


def configure_logging() -> None:
    """Configure structured logging for the application."""
    # Clear any existing root handlers to prevent duplicates on reload
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            sanitize_event_dict,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(
        ProcessorFormatter(
            processor=get_processors(colors=True)[-1],
            foreign_pre_chain=[add_log_level, add_timestamp],
        ),
    )
    root.addHandler(console_handler)
    configure_file_logging()


def configure_file_logging() -> None:
    """Attach a rotating file handler when `LOG_TO_FILE` is enabled."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(INFO)
    file_handler.setFormatter(
        ProcessorFormatter(
            processor=get_processors(colors=False)[-1],
            foreign_pre_chain=[add_log_level, add_timestamp],
        ),
    )
    root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog BoundLogger instance.
    """
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind request ID to the current logging context."""
    bind_contextvars(request_id=request_id)


def clear_context() -> None:
    clear_contextvars()
