from blogcms.schemas.asset import Asset, AssetPayload, NoAsset
from blogcms.schemas.auth import SessionData, TokenData
from blogcms.schemas.health import HealthCheckResponse
from blogcms.schemas.post import (
    DeletePostRequest,
    ErrorResponse,
    MessageResponse,
    PostForm,
    PostListing,
    PostListItem,
)

__all__ = [
    "Asset",
    "AssetPayload",
    "NoAsset",
    "SessionData",
    "TokenData",
    "HealthCheckResponse",
    "DeletePostRequest",
    "ErrorResponse",
    "MessageResponse",
    "PostForm",
    "PostListing",
    "PostListItem",
]
