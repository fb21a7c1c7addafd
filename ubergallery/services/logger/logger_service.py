# ubergallery/services/logger/logger_service.py
"""
Centralized logger service.

Wraps loguru behind a small service-logger facade so every module logs with
the same structure: a logger name, a source, an emoji and an optional dict of
context. Sinks are configured once at startup by ``initialize_global_logger``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger as _loguru_logger

from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .constants import (
    CONSOLE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_NAME,
    LOG_FILE_RETENTION,
    LOG_FILE_ROTATION,
)


def initialize_global_logger(
    level: LogLevel = LogLevel.INFO,
    enable_console: bool = True,
    enable_file_logging: bool = False,
    log_directory: Optional[Path] = None,
) -> None:
    """
    Configure loguru sinks for the application.

    Should be called once during startup; calling it again replaces every
    existing sink.

    Args:
        level: Minimum level for all sinks
        enable_console: Write logs to stderr
        enable_file_logging: Write logs to a rotating file in ``log_directory``
        log_directory: Directory for the log file (required for file logging)
    """
    _loguru_logger.remove()

    # Defaults so records logged through plain loguru still format
    _loguru_logger.configure(
        extra={
            "source": LogSource.SYSTEM.value,
            "logger_name": LoggerName.SYSTEM.value,
            "context": {},
        }
    )

    if enable_console:
        _loguru_logger.add(
            sys.stderr,
            level=level.value,
            format=CONSOLE_FORMAT,
            colorize=sys.stderr.isatty(),
        )

    if enable_file_logging and log_directory is not None:
        log_directory.mkdir(parents=True, exist_ok=True)
        _loguru_logger.add(
            log_directory / LOG_FILE_NAME,
            level=level.value,
            format=FILE_FORMAT,
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            enqueue=True,
        )


def _format_message(message: str, emoji: LogEmoji) -> str:
    return f"{emoji.value} {message}"


def get_service_logger(
    logger_name: LoggerName,
    source: LogSource = LogSource.SYSTEM,
    default_emoji: Optional[LogEmoji] = None,
):
    """
    Factory function to create a pre-configured logger for a specific service.

    Emoji priority system (highest to lowest):
    1. Direct: Emoji passed directly to log method call
    2. Instance-set: Default emoji set when creating the service logger
    3. Fallback: Default emoji based on log level

    Args:
        logger_name: The logger name enum bound to every record
        source: The log source enum bound to every record
        default_emoji: Instance-level default emoji that overrides level fallbacks

    Returns:
        ServiceLogger instance with error, warning, info, debug methods

    Example:
        logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)
        logger.warning("Thumbnail failed", extra_context={"filename": "a.jpg"})
    """

    bound = _loguru_logger.bind(logger_name=logger_name.value, source=source.value)

    def _resolve_emoji(
        method_emoji: Optional[LogEmoji], fallback_emoji: LogEmoji
    ) -> LogEmoji:
        if method_emoji is not None:
            return method_emoji
        if default_emoji is not None:
            return default_emoji
        return fallback_emoji

    class ServiceLogger:
        @staticmethod
        def error(
            message: str,
            exception: Optional[BaseException] = None,
            error_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
            **kwargs,
        ):
            """Log an error, attaching the exception traceback when given."""
            resolved_emoji = _resolve_emoji(emoji, LogEmoji.ERROR)
            context = dict(error_context or {})
            if exception is not None:
                context.setdefault("error_type", type(exception).__name__)
                context.setdefault("error_message", str(exception))
            bound.opt(exception=exception, depth=1).bind(context=context).error(
                _format_message(message, resolved_emoji)
            )

        @staticmethod
        def warning(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
            **kwargs,
        ):
            """Log a warning with emoji priority system."""
            resolved_emoji = _resolve_emoji(emoji, LogEmoji.WARNING)
            bound.opt(depth=1).bind(context=extra_context or {}).warning(
                _format_message(message, resolved_emoji)
            )

        @staticmethod
        def info(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
            **kwargs,
        ):
            """Log an info message with emoji priority system."""
            resolved_emoji = _resolve_emoji(emoji, LogEmoji.INFO)
            bound.opt(depth=1).bind(context=extra_context or {}).info(
                _format_message(message, resolved_emoji)
            )

        @staticmethod
        def debug(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
            **kwargs,
        ):
            """Log a debug message with emoji priority system."""
            resolved_emoji = _resolve_emoji(emoji, LogEmoji.DEBUG)
            bound.opt(depth=1).bind(context=extra_context or {}).debug(
                _format_message(message, resolved_emoji)
            )

    return ServiceLogger()
