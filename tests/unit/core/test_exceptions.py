"""Unit tests for custom exceptions and exception handlers.

Tests cover:
- Exception classes
- Error response models
- Handler responses for app, HTTP, validation and unexpected errors
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from starlette.testclient import TestClient

from recipe_converter.core.exceptions import (
    AppException,
    BadRequestException,
    ErrorDetail,
    ErrorResponse,
    UnitNotFoundException,
    setup_exception_handlers,
)


pytestmark = pytest.mark.unit


class _Body(BaseModel):
    servings: int


@pytest.fixture
def client() -> TestClient:
    """Create a client for an app whose routes raise each error type."""
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/unit")
    async def unit_error() -> None:
        raise UnitNotFoundException("pinch")

    @app.get("/bad")
    async def bad_request() -> None:
        raise BadRequestException("Both counts are required")

    @app.get("/http")
    async def http_error() -> None:
        raise HTTPException(status_code=503, detail="Service unavailable")

    @app.post("/validate")
    async def validate(body: _Body) -> _Body:
        return body

    @app.get("/boom")
    async def boom() -> None:
        msg = "kaboom"
        raise RuntimeError(msg)

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionClasses:
    """Tests for exception classes."""

    def test_app_exception_fields(self) -> None:
        """Should store status, error code, message and details."""
        details = [ErrorDetail(code="X", message="y")]
        exc = AppException(418, "TEAPOT", "Short and stout", details)

        assert exc.status_code == 418
        assert exc.error == "TEAPOT"
        assert exc.message == "Short and stout"
        assert exc.details == details
        assert str(exc) == "Short and stout"

    def test_unit_not_found(self) -> None:
        """Should be a 404 naming the unit."""
        exc = UnitNotFoundException("pinch")

        assert exc.status_code == 404
        assert exc.error == "UNIT_NOT_FOUND"
        assert exc.message == "Unrecognized unit: 'pinch'"

    def test_bad_request(self) -> None:
        """Should be a 400 with the given message."""
        exc = BadRequestException("nope")

        assert exc.status_code == 400
        assert exc.error == "BAD_REQUEST"
        assert isinstance(exc, AppException)


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_dumps_camel_case(self) -> None:
        """Should dump the request ID in camelCase."""
        response = ErrorResponse(error="E", message="m", request_id="abc")

        assert response.model_dump(by_alias=True) == {
            "error": "E",
            "message": "m",
            "details": None,
            "requestId": "abc",
        }


class TestExceptionHandlers:
    """Tests for registered exception handlers."""

    def test_app_exception(self, client: TestClient) -> None:
        """Should render AppException subclasses with their status."""
        response = client.get("/unit")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "UNIT_NOT_FOUND"
        assert body["message"] == "Unrecognized unit: 'pinch'"
        assert body["requestId"] is None

    def test_bad_request(self, client: TestClient) -> None:
        """Should render bad requests as 400."""
        response = client.get("/bad")

        assert response.status_code == 400
        assert response.json()["error"] == "BAD_REQUEST"

    def test_http_exception(self, client: TestClient) -> None:
        """Should render HTTP exceptions with their detail."""
        response = client.get("/http")

        assert response.status_code == 503
        assert response.json() == {
            "error": "HTTP_ERROR",
            "message": "Service unavailable",
            "details": None,
            "requestId": None,
        }

    def test_validation_error(self, client: TestClient) -> None:
        """Should render validation errors as 422 with field details."""
        response = client.post("/validate", json={"servings": "many"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.servings"

    def test_unexpected_exception(self, client: TestClient) -> None:
        """Should hide unexpected errors behind a generic 500."""
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
        assert response.json()["message"] == "An unexpected error occurred"
        assert "kaboom" not in response.text
