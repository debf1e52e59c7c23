# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from blogcms.db import get_session
from blogcms.main import app
from blogcms.managers.rate_limiter import limiter
from blogcms.services.storage import get_asset_store


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
    asset_store: MagicMock,
) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client against the app, backed by the in-memory store."""

    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_asset_store] = lambda: asset_store
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()
