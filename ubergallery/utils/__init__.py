"""
Utility functions for UberGallery.
"""

from .file_helpers import atomic_write_bytes, is_plain_filename, to_public_url

__all__ = [
    "atomic_write_bytes",
    "is_plain_filename",
    "to_public_url",
]
