"""
Post mutation error classes.

Validation and authorization failures raised by the post services before
any write reaches the store.
"""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
)

from blogcms.errors.base import BaseAppError, create_exception_handler
from blogcms.monitoring import get_logger

logger = get_logger(__name__)


class PostError(BaseAppError):
    """Base exception for post operation errors."""

    def __init__(
        self,
        detail: str = "Post operation failed",
        status_code: int = HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class ValidationFailedError(PostError):
    """A required field or identifier is missing."""

    def __init__(
        self,
        detail: str = "Title, content, author, category, and subcategory are required",
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class InvalidTargetError(PostError):
    """Update was requested without a target identifier."""

    def __init__(self, detail: str = "Invalid Post") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class UnauthorizedError(PostError):
    """No session accompanies the request."""

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(detail=detail, status_code=HTTP_401_UNAUTHORIZED)


class UserNotFoundError(PostError):
    """The session's user does not exist in the store."""

    def __init__(self, detail: str = "User not found") -> None:
        super().__init__(detail=detail, status_code=HTTP_404_NOT_FOUND)


class PostNotFoundError(PostError):
    """The target post does not exist."""

    def __init__(self, detail: str = "Post not found") -> None:
        super().__init__(detail=detail, status_code=HTTP_404_NOT_FOUND)


post_exception_handler = create_exception_handler(logger)
