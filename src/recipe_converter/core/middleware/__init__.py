"""HTTP middleware: request IDs, request logging, timing."""

from recipe_converter.core.middleware.logging import LoggingMiddleware
from recipe_converter.core.middleware.request_id import RequestIDMiddleware
from recipe_converter.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
