# ubergallery/exceptions.py
"""
Custom exceptions for UberGallery.

Centralized location for all custom exception classes to avoid
duplicating exception definitions across modules.
"""

# Each exception type represents a distinct error domain with specific
# handling requirements. Thumbnail errors never escape the cache; they are
# converted into a fallback to the source image.


class UberGalleryError(Exception):
    """Base exception for all UberGallery-specific errors."""

    pass


class ConfigurationError(UberGalleryError):
    """Custom exception for a gallery config file that cannot be loaded at all."""

    pass


class SourceUnreadableError(UberGalleryError):
    """Custom exception for a source image that cannot be opened or read."""

    pass


class GenerationError(UberGalleryError):
    """Custom exception for thumbnail resize or encode failures."""

    pass


class DecodeFailedError(GenerationError):
    """Custom exception for source bytes that are not a decodable image."""

    pass


class PersistFailedError(UberGalleryError):
    """Custom exception for thumbnail artifacts that could not be written."""

    pass


class GalleryDirectoryError(UberGalleryError):
    """Custom exception for a gallery directory that cannot be enumerated."""

    pass
