# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before blogcms settings are imported anywhere
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-blogcms"
os.environ["STORAGE_PROVIDER"] = "local"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime, timedelta
from io import BytesIO
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from PIL import Image
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from blogcms.managers.token_manager import create_access_token
from blogcms.models import CategoryDB, PostDB, PostStatus, SubcategoryDB, TagDB, UserDB

type PostFactory = Callable[..., PostDB]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def taxonomy(db_session: AsyncSession) -> dict[str, Any]:
    """Persist one category, one subcategory and two tags."""
    category = CategoryDB(name="Technology")
    subcategory = SubcategoryDB(name="Python")
    async_tag = TagDB(name="async")
    testing_tag = TagDB(name="testing")
    db_session.add_all([category, subcategory, async_tag, testing_tag])
    await db_session.commit()
    return {
        "category": category,
        "subcategory": subcategory,
        "tags": [async_tag, testing_tag],
    }


@pytest.fixture
async def user(db_session: AsyncSession) -> UserDB:
    """Persist the user behind `auth_headers`."""
    user = UserDB(username="writer", email="writer@example.com", display_name="Writer")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
def access_token(user: UserDB) -> str:
    return create_access_token(
        user_id=user.uuid,
        username=user.username,
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def auth_headers(access_token: str) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def ghost_headers() -> dict[str, str]:
    """Valid token for a user that does not exist in the store."""
    token = create_access_token(user_id=uuid4(), username="ghost")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_post(taxonomy: dict[str, Any]) -> PostFactory:
    """Build (unsaved) published posts referencing the seeded taxonomy."""
    counter = iter(range(1, 10_000))

    def factory(**overrides: Any) -> PostDB:
        number = next(counter)
        values: dict[str, Any] = {
            "title": f"Post {number}",
            "slug": f"post-{number}",
            "content": f"Content of post {number}",
            "excerpt": f"Excerpt {number}",
            "author": "Writer",
            "category": taxonomy["category"].id,
            "subcategory": taxonomy["subcategory"].id,
            "tags": [str(tag.id) for tag in taxonomy["tags"]],
            "status": PostStatus.PUBLISHED.value,
            "publish_date": datetime(2024, 1, 1, tzinfo=UTC) + timedelta(days=number),
        }
        values.update(overrides)
        return PostDB(**values)

    return factory


@pytest.fixture
def asset_store() -> MagicMock:
    """Asset store double returning a CDN-style URL for each key."""
    store = MagicMock()
    store.upload = AsyncMock(side_effect=lambda key, data, content_type: f"https://cdn.test/blog/{key}")
    return store


@pytest.fixture
def valid_png_bytes() -> bytes:
    """Create valid PNG image bytes."""
    img = Image.new("RGBA", (64, 64), color="blue")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def valid_jpeg_bytes() -> bytes:
    """Create valid JPEG image bytes."""
    img = Image.new("RGB", (64, 64), color="red")
    buffer = BytesIO()
    img.save(buffer, format="JPEG")
    return buffer.getvalue()
