"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    Users are managed elsewhere; post writes only check that the session's
    user exists here.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    uuid: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    display_name: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Name shown on the dashboard",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(second=0, microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
