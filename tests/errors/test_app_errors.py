"""Tests for blogcms/errors."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from blogcms.errors import (
    BaseAppError,
    InvalidTargetError,
    PostNotFoundError,
    StorageError,
    StoreUnavailableError,
    StoreValidationError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationFailedError,
    create_exception_handler,
    error_content,
    validation_exception_handler,
)
from blogcms.errors.validation import format_validation_errors


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"


@pytest.mark.parametrize(
    ("error", "status_code", "message"),
    [
        (ValidationFailedError(), 400, "Title, content, author, category, and subcategory are required"),
        (InvalidTargetError(), 400, "Invalid Post"),
        (StoreValidationError(), 400, "Invalid value for the database"),
        (UnauthorizedError(), 401, "Unauthorized"),
        (UserNotFoundError(), 404, "User not found"),
        (PostNotFoundError(), 404, "Post not found"),
        (StoreUnavailableError(), 500, "Failed to reach the database"),
        (StorageError(), 500, "We couldn't save your file. Please try again later."),
    ],
)
def test_error_kinds(error: BaseAppError, status_code: int, message: str) -> None:
    assert error.status_code == status_code
    assert error.detail == message


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = MagicMock()
        request.client.host = "192.168.1.1"
        request.url.path = "/api/posts"

        response = await handler(request, PostNotFoundError())

        assert response.status_code == 404
        assert orjson.loads(response.body) == {"status": "error", "message": "Post not found"}
        logger.warning.assert_called_once_with("Post not found for ip: 192.168.1.1 for endpoint /api/posts")

    @pytest.mark.asyncio
    async def test_handler_with_generic_exception(self) -> None:
        handler = create_exception_handler(MagicMock())
        request = MagicMock()
        request.client = None
        request.url.path = "/api/posts"

        response = await handler(request, ValueError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == error_content("Internal Server Error")


class TestValidationExceptionHandler:
    """Tests for the request-validation handler."""

    @pytest.mark.asyncio
    async def test_renders_shared_error_body(self) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("query", "page"),
                    "msg": "Input should be greater than or equal to 1",
                    "type": "greater_than_equal",
                    "ctx": {"ge": 1},
                },
            ],
        )
        request = MagicMock()
        request.client.host = "10.0.0.1"
        request.url.path = "/api/posts"

        response = await validation_exception_handler(request, exc)

        assert response.status_code == 422
        assert orjson.loads(response.body) == {
            "status": "error",
            "message": "Validation failed",
            "errors": [
                {
                    "field": "page",
                    "message": "Input should be greater than or equal to 1",
                    "type": "greater_than_equal",
                    "context": {"ge": 1},
                },
            ],
        }

    def test_exception_context_is_stringified(self) -> None:
        exc = RequestValidationError(
            [{"loc": ("body", "id"), "msg": "bad", "type": "value_error", "ctx": {"error": ValueError("nope")}}],
        )

        [entry] = format_validation_errors(exc)

        assert entry["field"] == "id"
        assert entry["context"] == {"error": "nope"}
