"""Request logging middleware.

Logs one line when a request starts and one when it completes, with the
method and path bound to the logging context. Health probes are skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_converter.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


logger = get_logger(__name__)

DEFAULT_EXCLUDED_PATHS = frozenset({"/health", "/favicon.ico"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = frozenset(exclude_paths or DEFAULT_EXCLUDED_PATHS)

    def _is_excluded(self, path: str) -> bool:
        return any(path == p or path.endswith(p) for p in self.exclude_paths)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request and response."""
        if self._is_excluded(request.url.path):
            return await call_next(request)

        bind_context(method=request.method, path=request.url.path)
        logger.info(
            "Request started",
            client_ip=_client_ip(request),
            query_params=str(request.query_params) or None,
        )

        response = await call_next(request)

        log = logger.warning if response.status_code >= 500 else logger.info
        log("Request completed", status_code=response.status_code)
        return response


def _client_ip(request: Request) -> str:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"
