# ubergallery/middleware/error_handler.py
"""
Error handling middleware for FastAPI application.

Provides centralized error handling, logging, and user-friendly error responses
while maintaining security by not exposing internal details.
"""

import traceback
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..enums import LogEmoji, LoggerName, LogSource
from ..services.logger import get_service_logger

logger = get_service_logger(LoggerName.ERROR_HANDLER, LogSource.MIDDLEWARE)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Centralized error handling middleware.

    Catches all unhandled exceptions, logs them with correlation IDs,
    and returns user-friendly error responses.
    """

    def __init__(self, app: ASGIApp, debug_mode: bool = False):
        super().__init__(app)
        self.debug_mode = debug_mode

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and handle any errors that occur."""

        # Generate correlation ID for request tracking
        correlation_id = str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        try:
            return await call_next(request)

        except Exception as exc:
            self._log_error(exc, request, correlation_id)
            return self._create_error_response(exc, correlation_id)

    def _log_error(self, exc: Exception, request: Request, correlation_id: str) -> None:
        """Log error with full context and correlation ID."""
        logger.error(
            f"Unhandled exception in {request.method} {request.url.path}",
            exception=exc,
            emoji=LogEmoji.ERROR,
            error_context={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": getattr(request.client, "host", "unknown"),
            },
        )

    def _create_error_response(
        self, exc: Exception, correlation_id: str
    ) -> JSONResponse:
        """Create appropriate error response based on exception type."""
        timestamp = datetime.now(timezone.utc).isoformat()

        if isinstance(exc, HTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": {
                        "type": "http_error",
                        "message": exc.detail,
                        "status_code": exc.status_code,
                        "correlation_id": correlation_id,
                        "timestamp": timestamp,
                    }
                },
            )

        response_data = {
            "error": {
                "type": "internal_error",
                "message": "An internal server error occurred",
                "correlation_id": correlation_id,
                "timestamp": timestamp,
            }
        }
        # Include exception details in debug mode
        if self.debug_mode:
            response_data["error"]["exception_type"] = type(exc).__name__
            response_data["error"]["exception_message"] = str(exc)
            response_data["error"]["traceback"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return JSONResponse(status_code=500, content=response_data)
