"""
Storage services package.

This package provides asset stores for featured images, with support for
the local filesystem and Cloudinary.
"""

from blogcms.configs.settings import settings
from blogcms.services.storage.base import AssetStore
from blogcms.services.storage.cloudinary_storage import CloudinaryStorage
from blogcms.services.storage.local import LocalStorage


def get_asset_store() -> AssetStore:
    """
    Get the configured asset store.

    Returns the appropriate storage implementation based on
    the STORAGE_PROVIDER setting.

    Returns:
        AssetStore: Configured storage service instance
    """
    if settings.STORAGE_PROVIDER == "cloudinary":
        return CloudinaryStorage()
    return LocalStorage()


__all__ = [
    "AssetStore",
    "CloudinaryStorage",
    "LocalStorage",
    "get_asset_store",
]
