"""
Base storage protocol for featured-image uploads.

This module defines the interface for asset backends, allowing for
different implementations (local, cloudinary, ...).
"""

from abc import abstractmethod
from typing import Protocol


class AssetStore(Protocol):
    """
    Protocol defining the interface for asset stores.

    Objects are addressed by a caller-chosen key; uploading to an existing
    key replaces the stored object.
    """

    @abstractmethod
    async def upload(self, key: str, file_data: bytes, content_type: str) -> str:
        """
        Upload an object under the given key.

        Args:
            key: Object key, e.g. ``post-12345678901.png``
            file_data: Raw file bytes
            content_type: MIME type of the file

        Returns:
            str: Public URL of the stored object
        """
        ...
