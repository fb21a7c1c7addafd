# ubergallery/middleware/request_logger.py
"""
Request logging middleware for FastAPI application.

Logs every request with timing, status code and correlation ID.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..enums import LogEmoji, LoggerName, LogSource
from ..services.logger import get_service_logger

logger = get_service_logger(LoggerName.REQUEST_LOGGER, LogSource.MIDDLEWARE)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware with performance metrics.

    Static files under the public prefix are logged at debug level only,
    since a single gallery page triggers one request per thumbnail.
    """

    def __init__(self, app: ASGIApp, quiet_prefixes: tuple = ()):
        super().__init__(app)

        # Paths to exclude from logging entirely
        self.exclude_paths = {"/health", "/favicon.ico"}
        self.quiet_prefixes = quiet_prefixes

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and log details with timing."""
        path = request.url.path
        if path in self.exclude_paths:
            return await call_next(request)

        start_time = time.time()
        correlation_id = getattr(request.state, "correlation_id", "unknown")

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            logger.warning(
                f"{request.method} {path} failed after {duration_ms}ms",
                emoji=LogEmoji.FAILED,
                extra_context={
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                    "duration_ms": duration_ms,
                },
            )
            # Re-raise exception for error handler
            raise

        duration_ms = round((time.time() - start_time) * 1000, 2)
        context = {
            "correlation_id": correlation_id,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "client_ip": getattr(request.client, "host", "unknown"),
        }
        message = f"{request.method} {path} -> {response.status_code} ({duration_ms}ms)"

        if path.startswith(self.quiet_prefixes):
            logger.debug(message, emoji=LogEmoji.RESPONSE, extra_context=context)
        else:
            logger.info(message, emoji=LogEmoji.RESPONSE, extra_context=context)

        return response
