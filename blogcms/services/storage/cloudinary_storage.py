"""
Cloudinary storage implementation.

Production backend for featured images: automatic optimization and CDN
delivery.
"""

from asyncio import get_event_loop
from functools import partial
from pathlib import PurePosixPath

from cloudinary import config
from cloudinary.uploader import upload

from blogcms.configs.settings import settings


class CloudinaryStorage:
    """
    Cloudinary storage implementation.

    Keys map to public IDs under the configured asset folder. Cloudinary
    manages the file format itself, so the key's extension is dropped.
    """

    def __init__(self, folder: str | None = None) -> None:
        """Initialize Cloudinary with configured credentials."""
        config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET.get_secret_value(),
            secure=True,
        )
        self.folder = folder or settings.ASSET_FOLDER

    def _get_public_id(self, key: str) -> str:
        return f"{self.folder}/{PurePosixPath(key).stem}"

    async def upload(self, key: str, file_data: bytes, content_type: str) -> str:
        """
        Upload an image to Cloudinary, replacing any object with the same key.

        Args:
            key: Object key
            file_data: Raw image bytes
            content_type: MIME type of the image

        Returns:
            str: Cloudinary secure URL of the uploaded image
        """
        # Run blocking Cloudinary upload in thread pool
        loop = get_event_loop()
        result = await loop.run_in_executor(
            None,
            partial(
                upload,
                file_data,
                public_id=self._get_public_id(key),
                overwrite=True,
                invalidate=True,
                resource_type="image",
                transformation=[
                    {"quality": "auto:good"},
                    {"fetch_format": "auto"},
                ],
            ),
        )

        return result["secure_url"]
