"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog posts backend.
"""

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
DEFAULT_PAGE = 1
PUBLISH_DATE_FORMAT = "%d-%m-%Y"
TAG_SEPARATOR = ","

# Response constants
POST_CREATED_MESSAGE = "Post created successfully"
POST_UPDATED_MESSAGE = "Post updated successfully"
POST_DELETED_MESSAGE = "Post deleted successfully"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Posts Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_RECYCLE: int = 1800  # seconds
    # Upper bound on waiting for a usable connection (pool checkout and connect)
    SERVER_SELECTION_TIMEOUT: float = 30.0  # seconds

    # Session token verification
    SECRET_KEY: SecretStr = SecretStr("change-me")
    ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "blogcms"
    JWT_AUDIENCE: str = "blogcms-api"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Asset storage
    STORAGE_PROVIDER: Literal["local", "cloudinary"] = "local"
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: SecretStr = SecretStr("")
    UPLOADS_DIR: Path = Path("uploads")
    UPLOADS_BASE_URL: str = "/uploads"
    # Origin that serves the mounted uploads; prefixes local asset URLs
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    ASSET_FOLDER: str = "blog"
    ASSET_UPLOAD_TIMEOUT: float = 60.0  # seconds

    # Listing
    DEFAULT_PAGE_LIMIT: int = 6

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight to `slowapi.Limiter`."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    default_limits: list[str] = ["100/hour"]
    headers_enabled: bool = False
    strategy: Literal["fixed-window", "moving-window"] = "fixed-window"


settings = Settings()
