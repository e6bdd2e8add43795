"""Request ID middleware for log correlation.

Propagates the caller's X-Request-ID (or generates one), exposes it on
``request.state.request_id`` for error responses, binds it to the logging
context, and echoes it on the response.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_converter.observability.logging import bind_context, clear_context


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


# Longer inbound IDs are replaced rather than logged
MAX_REQUEST_ID_LENGTH: Final[int] = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    def _resolve_request_id(self, request: Request) -> str:
        incoming = request.headers.get(self.header_name, "").strip()
        if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
            return incoming
        return str(uuid.uuid4())

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID."""
        clear_context()

        request_id = self._resolve_request_id(request)
        request.state.request_id = request_id
        bind_context(request_id=request_id)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
