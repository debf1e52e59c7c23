"""
Post schemas.

Request payloads for post writes and the read-model shapes returned by the
public listing. Field aliases follow the wire format of the listing and of
the multipart forms (``metaTitle``, ``featuredImage``...).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blogcms.schemas.asset import AssetPayload, NoAsset


@dataclass(frozen=True)
class PostForm:
    """
    Fields submitted to create or update a post.

    Every scalar is kept exactly as submitted (``None`` when absent) so that
    updates can overwrite stored values with empty ones.
    """

    id: str | None = None
    title: str | None = None
    slug: str | None = None
    content: str | None = None
    excerpt: str | None = None
    author: str | None = None
    category: str | None = None
    subcategory: str | None = None
    tags: tuple[str, ...] = ()
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    image_credit: str | None = None
    status: str | None = None
    featured_image: AssetPayload = field(default_factory=NoAsset)

    def missing_required(self) -> bool:
        """True when any field a post cannot exist without is empty."""
        return not all((self.title, self.content, self.author, self.category, self.subcategory))


class DeletePostRequest(BaseModel):
    """JSON body of a delete request."""

    id: str | None = None


class PostListItem(BaseModel):
    """A published post as served by the public listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    title: str
    slug: str | None = None
    content: str
    excerpt: str | None = None
    author: str
    category: UUID | None = None
    subcategory: UUID | None = None
    tags: list[UUID] = Field(default_factory=list)
    publish_date: str = Field(description="Publication date as DD-MM-YYYY")
    category_name: str | None = Field(default=None, alias="categoryName")
    subcategory_name: str | None = Field(default=None, alias="subcategoryName")
    tag_names: list[str] = Field(default_factory=list, alias="tagNames")
    meta_title: str | None = Field(default=None, alias="metaTitle")
    meta_description: str | None = Field(default=None, alias="metaDescription")
    meta_keywords: str | None = Field(default=None, alias="metaKeywords")
    featured_image: str = Field(default="", alias="featuredImage")
    image_credit: str | None = Field(default=None, alias="imageCredit")
    status: str | None = None
    updated_date: datetime


class PostListing(BaseModel):
    """One page of the public listing."""

    model_config = ConfigDict(populate_by_name=True)

    posts: list[PostListItem]
    total_pages: int = Field(alias="totalPages")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str

    @classmethod
    def example(cls, message: str) -> dict[str, Any]:
        return {"application/json": {"example": {"status": "error", "message": message}}}
