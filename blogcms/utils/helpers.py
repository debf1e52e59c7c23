from datetime import datetime
from re import sub

from fastapi import Request


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def slugify(title: str) -> str:
    """
    Build a URL-friendly slug from a post title.

    Args:
        title: Post title

    Returns:
        str: Lowercase slug with hyphen separators (may be empty)
    """
    slug = title.lower()
    slug = sub(r"[^a-z0-9\s-]", "", slug)
    slug = sub(r"\s+", "-", slug)
    slug = sub(r"-+", "-", slug)
    return slug.strip("-")
