"""Session schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class TokenData(BaseModel):
    """Claims read from a verified access token."""

    username: str
    user_id: UUID
    jti: str
    token_type: str


class SessionData(BaseModel):
    """The authenticated actor behind a request."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
