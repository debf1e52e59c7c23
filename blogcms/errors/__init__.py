from blogcms.errors.base import BaseAppError, create_exception_handler, error_content
from blogcms.errors.database import (
    DatabaseError,
    DatabaseInitializationError,
    StoreUnavailableError,
    StoreValidationError,
    database_exception_handler,
)
from blogcms.errors.posts import (
    InvalidTargetError,
    PostError,
    PostNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationFailedError,
    post_exception_handler,
)
from blogcms.errors.upload import StorageError, UploadError, upload_exception_handler
from blogcms.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "error_content",
    "DatabaseError",
    "DatabaseInitializationError",
    "StoreUnavailableError",
    "StoreValidationError",
    "database_exception_handler",
    "InvalidTargetError",
    "PostError",
    "PostNotFoundError",
    "UnauthorizedError",
    "UserNotFoundError",
    "ValidationFailedError",
    "post_exception_handler",
    "StorageError",
    "UploadError",
    "upload_exception_handler",
    "validation_exception_handler",
]
