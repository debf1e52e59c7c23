"""Tests for engine configuration."""

import pytest

from blogcms.configs import settings
from blogcms.db.database import engine_kwargs


class TestEngineKwargs:
    """Tests for per-backend engine options."""

    def test_sqlite_has_no_pool_sizing(self) -> None:
        kwargs = engine_kwargs("sqlite+aiosqlite:///./blog.db")

        assert "pool_size" not in kwargs
        assert kwargs["connect_args"] == {"timeout": settings.SERVER_SELECTION_TIMEOUT}

    def test_postgres_bounds_waiting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "SERVER_SELECTION_TIMEOUT", 30.0)

        kwargs = engine_kwargs("postgresql+asyncpg://user:pw@db:5432/blog")

        assert kwargs["pool_timeout"] == 30.0
        assert kwargs["connect_args"]["timeout"] == 30.0
        assert kwargs["pool_size"] == settings.POOL_SIZE
        assert kwargs["pool_pre_ping"] is True
