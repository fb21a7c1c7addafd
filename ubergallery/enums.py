# ubergallery/enums.py
"""
Enum definitions for UberGallery.

Centralized location for all enum classes so that logging categories,
sort orders and failure reasons are type-safe across modules.
"""

from enum import Enum


# =============================================================================
# LOGGING SYSTEMS
# =============================================================================


class LogLevel(str, Enum):
    """Log level constants for centralized logging system."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogSource(str, Enum):
    """Log source constants for identifying log origins."""

    API = "api"
    SYSTEM = "system"
    PIPELINE = "pipeline"
    MIDDLEWARE = "middleware"
    CONFIG = "config"


class LogEmoji(str, Enum):
    """Type-safe emoji constants for log messages."""

    # Response emojis
    RESPONSE = "📤"

    # Status emojis
    FAILED = "❌"
    ERROR = "🚨"
    WARNING = "⚠️"
    INFO = "ℹ️"
    DEBUG = "🐞"

    # Gallery emojis
    IMAGE = "🖼️"
    THUMBNAIL = "🧩"

    # System emojis
    STARTUP = "🚀"
    SHUTDOWN = "🛑"
    SECURITY = "🔒"
    CONFIG = "📝"


class LoggerName(str, Enum):
    """Logger name constants for categorizing log entries."""

    # API/Request loggers
    REQUEST_LOGGER = "request_logger"
    ERROR_HANDLER = "error_handler"

    # Pipeline loggers
    THUMBNAIL_PIPELINE = "thumbnail_pipeline"

    # Service loggers
    GALLERY_SERVICE = "gallery_service"
    CONFIG = "config"

    # System loggers
    SYSTEM = "system"
    API = "api"


# =============================================================================
# GALLERY SYSTEMS
# =============================================================================


class ImageSortBy(str, Enum):
    """Sort orders supported by the gallery listing."""

    NAME = "name"
    MODIFIED = "modified"


class ThumbnailFallbackReason(str, Enum):
    """Why a resolution returned the source path instead of a thumbnail."""

    INVALID_FILENAME = "invalid_filename"
    SOURCE_UNREADABLE = "source_unreadable"
    GENERATION_FAILED = "generation_failed"
    PERSIST_FAILED = "persist_failed"
