"""
Local filesystem storage implementation.

This module provides a local storage backend for development and testing.
Files are written under the configured uploads directory and served as
static files.
"""

from pathlib import Path

import aiofiles

from blogcms.configs.settings import settings


class LocalStorage:
    """
    Local filesystem storage implementation.

    Stores files under ``<UPLOADS_DIR>/<folder>/<key>`` and returns the
    absolute URL they are served from.
    """

    def __init__(
        self,
        uploads_dir: Path | None = None,
        folder: str | None = None,
        base_url: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """Initialize local storage with configured paths."""
        self.uploads_dir = uploads_dir or settings.UPLOADS_DIR
        self.folder = folder or settings.ASSET_FOLDER
        self.base_url = (base_url or settings.UPLOADS_BASE_URL).rstrip("/")
        self.public_base_url = (public_base_url or settings.PUBLIC_BASE_URL).rstrip("/")
        self.base_path = self.uploads_dir / self.folder

    def _get_file_path(self, key: str) -> Path:
        """
        Get the file path for an object key.

        Args:
            key: Object key

        Returns:
            Path: Full path to the stored file
        """
        return self.base_path / Path(key).name

    async def upload(self, key: str, file_data: bytes, content_type: str) -> str:
        """
        Write the file to the local filesystem, replacing any previous copy.

        Args:
            key: Object key
            file_data: Raw file bytes
            content_type: MIME type of the file

        Returns:
            str: Absolute URL of the uploaded file
        """
        self.base_path.mkdir(parents=True, exist_ok=True)
        file_path = self._get_file_path(key)

        async with aiofiles.open(file_path, "wb") as f:
            await f.write(file_data)

        return f"{self.public_base_url}{self.base_url}/{self.folder}/{file_path.name}"
