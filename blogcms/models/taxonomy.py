"""Taxonomy models referenced by posts: categories, subcategories and tags."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class CategoryDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "categories")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    name: str = Field(sa_column=Column(String(100), nullable=False))


class SubcategoryDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "subcategories")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    name: str = Field(sa_column=Column(String(100), nullable=False))


class TagDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "tags")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    name: str = Field(sa_column=Column(String(100), nullable=False))
