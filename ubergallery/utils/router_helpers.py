# ubergallery/utils/router_helpers.py
"""
Shared helpers for router endpoints.
"""

from functools import wraps
from typing import Callable

from fastapi import HTTPException

from ..enums import LoggerName, LogSource
from ..services.logger import get_service_logger

logger = get_service_logger(LoggerName.API, LogSource.API)


def handle_exceptions(operation_name: str):
    """
    Decorator for standardized exception handling in router endpoints.

    Provides consistent error logging and HTTP response patterns across all routers.

    Args:
        operation_name: Human-readable description of the operation for error messages

    Usage:
        @handle_exceptions("list gallery images")
        async def list_images():
            # endpoint logic here
            pass
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTP exceptions as-is
                raise
            except Exception as e:
                logger.error(
                    f"Error trying to {operation_name}",
                    exception=e,
                    error_context={"operation": operation_name},
                )
                raise HTTPException(
                    status_code=500, detail=f"Failed to {operation_name}"
                ) from e

        return wrapper

    return decorator
