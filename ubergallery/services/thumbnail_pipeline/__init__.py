"""
Thumbnail pipeline: JPEG thumbnail generation and the on-disk cache in front of it.
"""

from .generators.thumbnail_generator import (
    ThumbnailGenerator,
    calculate_thumbnail_dimensions,
    clamp_quality,
)
from .thumbnail_cache import CacheKey, ThumbnailCache, ThumbnailCacheStats

__all__ = [
    "CacheKey",
    "ThumbnailCache",
    "ThumbnailCacheStats",
    "ThumbnailGenerator",
    "calculate_thumbnail_dimensions",
    "clamp_quality",
]
