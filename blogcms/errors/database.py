from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from blogcms.errors.base import BaseAppError, create_exception_handler
from blogcms.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class StoreUnavailableError(DatabaseError):
    """Exception raised when the store cannot be reached or a query fails."""

    def __init__(
        self,
        detail: str = "Failed to reach the database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class StoreValidationError(DatabaseError):
    """Exception raised when the store rejects a submitted value."""

    def __init__(
        self,
        detail: str = "Invalid value for the database",
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class DatabaseInitializationError(DatabaseError):
    """Exception raised when database initialization fails."""

    def __init__(
        self,
        detail: str = "Failed to initialize database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


database_exception_handler = create_exception_handler(logger)
