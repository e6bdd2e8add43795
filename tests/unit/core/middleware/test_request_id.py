"""Unit tests for request ID middleware.

Tests cover:
- Request ID generation
- Request ID propagation from headers
- Oversized inbound IDs
- Logging context binding
"""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from recipe_converter.core.middleware.request_id import (
    MAX_REQUEST_ID_LENGTH,
    RequestIDMiddleware,
)


pytestmark = pytest.mark.unit


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    request.state = MagicMock()
    return request


def _response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    def test_init_custom_header(self) -> None:
        """Should accept custom header name."""
        middleware = RequestIDMiddleware(MagicMock(), header_name="X-Correlation-ID")
        assert middleware.header_name == "X-Correlation-ID"

    async def test_generates_request_id_when_missing(self) -> None:
        """Should generate a UUID when no request ID header is present."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request({})
        call_next = AsyncMock(return_value=_response())

        with (
            patch("recipe_converter.core.middleware.request_id.clear_context"),
            patch("recipe_converter.core.middleware.request_id.bind_context"),
        ):
            result = await middleware.dispatch(request, call_next)

        generated = result.headers["X-Request-ID"]
        assert uuid.UUID(generated)
        assert request.state.request_id == generated

    async def test_propagates_existing_request_id(self) -> None:
        """Should reuse the caller's request ID."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request({"X-Request-ID": "req-123"})
        call_next = AsyncMock(return_value=_response())

        with (
            patch("recipe_converter.core.middleware.request_id.clear_context"),
            patch("recipe_converter.core.middleware.request_id.bind_context") as mock_bind,
        ):
            result = await middleware.dispatch(request, call_next)

        assert request.state.request_id == "req-123"
        assert result.headers["X-Request-ID"] == "req-123"
        mock_bind.assert_called_once_with(request_id="req-123")

    async def test_replaces_oversized_request_id(self) -> None:
        """Should not trust inbound IDs longer than the limit."""
        middleware = RequestIDMiddleware(MagicMock())
        oversized = "x" * (MAX_REQUEST_ID_LENGTH + 1)
        request = _request({"X-Request-ID": oversized})
        call_next = AsyncMock(return_value=_response())

        with (
            patch("recipe_converter.core.middleware.request_id.clear_context"),
            patch("recipe_converter.core.middleware.request_id.bind_context"),
        ):
            result = await middleware.dispatch(request, call_next)

        assert result.headers["X-Request-ID"] != oversized

    async def test_clears_context_at_start(self) -> None:
        """Should clear logging context at request start."""
        middleware = RequestIDMiddleware(MagicMock())
        call_next = AsyncMock(return_value=_response())

        with (
            patch(
                "recipe_converter.core.middleware.request_id.clear_context"
            ) as mock_clear,
            patch("recipe_converter.core.middleware.request_id.bind_context"),
        ):
            await middleware.dispatch(_request({}), call_next)

        mock_clear.assert_called_once()
