"""Database engine and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blogcms.configs import settings
from blogcms.errors.database import DatabaseInitializationError
from blogcms.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000

_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None


def engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build engine options for the configured backend.

    Pool checkout and connection establishment are both capped by
    `SERVER_SELECTION_TIMEOUT`, so an unreachable database fails instead of
    queueing requests indefinitely.
    """
    timeout = settings.SERVER_SELECTION_TIMEOUT
    kwargs: dict[str, Any] = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}

    backend = make_url(database_url).get_backend_name()
    if backend == "sqlite":
        kwargs["connect_args"] = {"timeout": timeout}
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=timeout,
        pool_recycle=settings.POOL_RECYCLE,
        connect_args={
            "timeout": timeout,
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )
    return kwargs


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it on first use."""
    global _engine, _session_maker

    if _engine is None:
        _engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs(settings.DATABASE_URL))
        _session_maker = async_sessionmaker(
            _engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.debug("Database engine created")
    return _engine


def get_session_maker() -> async_sessionmaker[SQLModelAsyncSession]:
    get_engine()
    assert _session_maker is not None
    return _session_maker


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Writes are committed by the repositories one operation at a time; the
    session only guarantees cleanup.

    Yields:
        AsyncSession: Database session
    """
    async with get_session_maker()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create all tables defined in SQLModel models.

    Note:
        This is a simple initialization for development.
        Tables that already exist are left untouched.
    """
    # Import all models to ensure they are registered
    from blogcms.models import CategoryDB, PostDB, SubcategoryDB, TagDB, UserDB  # noqa: F401, PLC0415

    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        raise DatabaseInitializationError(detail=f"Failed to initialize database: {e}") from e
    logger.info("Database initialized successfully!")


async def close_db() -> None:
    """Dispose of the shared engine, if one was created."""
    global _engine, _session_maker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_maker = None
        logger.info("Database connections closed")
