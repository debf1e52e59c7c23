"""
Upload-related error classes.

This module defines custom exceptions for featured-image uploads to the
asset store.
"""

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blogcms.errors.base import BaseAppError, create_exception_handler
from blogcms.monitoring import get_logger

logger = get_logger(__name__)


class UploadError(BaseAppError):
    """Base exception for upload-related errors."""

    def __init__(
        self,
        detail: str = "We couldn't upload your file. Please try again.",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class StorageError(UploadError):
    """Exception raised when storage operation fails."""

    def __init__(self, detail: str = "We couldn't save your file. Please try again later.") -> None:
        super().__init__(detail=detail, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


upload_exception_handler = create_exception_handler(logger)
