"""Post database model using SQLModel."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class PostStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class PostDB(SQLModel, table=True):
    """
    Post database model.

    Category, subcategory and tags are plain references: nothing enforces
    that they resolve, and the listing tolerates dangling ones.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_status_publish_date", "status", "publish_date"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Post title",
    )
    slug: str | None = Field(
        default=None,
        sa_column=Column(String(200), index=True),
        description="URL-friendly slug",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post content",
    )
    excerpt: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Short excerpt shown in listings",
    )
    author: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Author shown on the post",
    )

    # References
    category: UUID | None = Field(default=None, index=True, description="Category ID")
    subcategory: UUID | None = Field(default=None, index=True, description="Subcategory ID")
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False),
        description="Ordered tag IDs",
    )

    # SEO fields
    meta_title: str | None = Field(default=None, sa_column=Column(String(300)))
    meta_description: str | None = Field(default=None, sa_column=Column(Text))
    meta_keywords: str | None = Field(default=None, sa_column=Column(Text))

    # Image fields
    featured_image: str = Field(
        default="",
        sa_column=Column(String(1000), nullable=False, default=""),
        description="Public URL of the featured image, or empty",
    )
    image_credit: str | None = Field(default=None, sa_column=Column(String(500)))

    status: str | None = Field(
        default=None,
        sa_column=Column(String(20), index=True),
        description="Post status (draft, published, archived)",
    )

    # Timestamps (timezone-aware)
    publish_date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Publication timestamp",
    )
    updated_date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Learning Python Generators",
                "slug": "learning-python-generators",
                "content": "Generators let you...",
                "excerpt": "A gentle introduction",
                "author": "Jane Doe",
                "category": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "subcategory": "4fa85f64-5717-4562-b3fc-2c963f66afa7",
                "tags": ["5fa85f64-5717-4562-b3fc-2c963f66afa8"],
                "featured_image": "",
                "status": "published",
            },
        },
    )
