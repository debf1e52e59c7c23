"""Core database modules."""

from blogcms.db.database import (
    close_db,
    engine_kwargs,
    get_engine,
    get_session,
    get_session_maker,
    init_db,
)

__all__ = [
    "close_db",
    "engine_kwargs",
    "get_engine",
    "get_session",
    "get_session_maker",
    "init_db",
]
