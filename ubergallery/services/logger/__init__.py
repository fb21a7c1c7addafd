"""
Centralized Logger Service Module.

A unified logging interface over loguru.

Usage:
    from ubergallery.services.logger import get_service_logger
    from ubergallery.enums import LogSource, LoggerName

    logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)
    logger.info("Generated thumbnail", extra_context={"filename": "a.jpg"})
"""

# Re-export commonly used enums for convenience
from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .logger_service import get_service_logger, initialize_global_logger

__all__ = [
    "get_service_logger",
    "initialize_global_logger",
    # Enums
    "LogLevel",
    "LogSource",
    "LoggerName",
    "LogEmoji",
]
