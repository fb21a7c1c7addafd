# ubergallery/services/thumbnail_pipeline/generators/thumbnail_generator.py
"""
Thumbnail Generator Component

Decodes source image bytes, shrinks them to fit inside a bounding box and
re-encodes them as JPEG. Pure transform over bytes: no filesystem access.
"""

import io
from typing import Tuple

from PIL import Image, ImageOps

from ....constants import (
    MAX_THUMBNAIL_QUALITY,
    MIN_THUMBNAIL_QUALITY,
    THUMBNAIL_BACKGROUND_COLOR,
    THUMBNAIL_FORMAT,
)
from ....enums import LogEmoji, LoggerName, LogSource
from ....exceptions import DecodeFailedError, GenerationError
from ....services.logger import get_service_logger

logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)


def clamp_quality(quality: int) -> int:
    """
    Clamp a JPEG quality value into the supported range.

    Out of range values are not rejected: they are moved to the nearest
    bound and a warning is logged.
    """
    if quality < MIN_THUMBNAIL_QUALITY:
        logger.warning(
            f"Thumbnail quality must be >= {MIN_THUMBNAIL_QUALITY}; "
            f"set to {MIN_THUMBNAIL_QUALITY}",
            extra_context={"requested_quality": quality},
        )
        return MIN_THUMBNAIL_QUALITY
    if quality > MAX_THUMBNAIL_QUALITY:
        logger.warning(
            f"Thumbnail quality must be <= {MAX_THUMBNAIL_QUALITY}; "
            f"set to {MAX_THUMBNAIL_QUALITY}",
            extra_context={"requested_quality": quality},
        )
        return MAX_THUMBNAIL_QUALITY
    return quality


def calculate_thumbnail_dimensions(
    source_size: Tuple[int, int], max_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Calculate dimensions that fit within max_size while preserving aspect ratio.

    Images already inside the box keep their size. Neither dimension drops
    below one pixel.

    Args:
        source_size: (width, height) of source image
        max_size: (width, height) bounding box

    Returns:
        (width, height) of the thumbnail
    """
    source_width, source_height = source_size
    max_width, max_height = max_size

    if source_width <= max_width and source_height <= max_height:
        return (source_width, source_height)

    scale = min(max_width / source_width, max_height / source_height)
    new_width = max(1, min(max_width, round(source_width * scale)))
    new_height = max(1, min(max_height, round(source_height * scale)))

    return (new_width, new_height)


class ThumbnailGenerator:
    """
    Component responsible for turning source image bytes into JPEG thumbnails.

    Uses Lanczos resampling so downscaled gallery images stay free of
    aliasing artifacts.
    """

    def __init__(self, image_format: str = THUMBNAIL_FORMAT):
        self.image_format = image_format

    def generate(
        self, source_bytes: bytes, max_width: int, max_height: int, quality: int
    ) -> bytes:
        """
        Generate an encoded thumbnail from source image bytes.

        Args:
            source_bytes: Raw bytes of any format Pillow can decode
            max_width: Maximum thumbnail width in pixels
            max_height: Maximum thumbnail height in pixels
            quality: JPEG quality, clamped into [0, 100]

        Returns:
            Encoded thumbnail bytes

        Raises:
            DecodeFailedError: If the bytes are not a decodable image
            GenerationError: If the bounding box is invalid or resize/encode fails
        """
        if max_width <= 0 or max_height <= 0:
            raise GenerationError(
                f"Invalid thumbnail bounds {max_width}x{max_height}"
            )

        quality = clamp_quality(quality)
        img = self._decode(source_bytes)

        try:
            img = self._normalize_mode(img)
            thumbnail_size = calculate_thumbnail_dimensions(
                img.size, (max_width, max_height)
            )
            if thumbnail_size != img.size:
                img = img.resize(thumbnail_size, Image.Resampling.LANCZOS)

            buffer = io.BytesIO()
            img.save(buffer, self.image_format, quality=quality, optimize=True)
        except (OSError, ValueError) as e:
            raise GenerationError(f"Image processing failed: {e}") from e

        logger.debug(
            f"Generated {thumbnail_size[0]}x{thumbnail_size[1]} thumbnail",
            emoji=LogEmoji.THUMBNAIL,
            extra_context={
                "bounds": (max_width, max_height),
                "quality": quality,
                "bytes": buffer.tell(),
            },
        )
        return buffer.getvalue()

    def _decode(self, source_bytes: bytes) -> Image.Image:
        try:
            with Image.open(io.BytesIO(source_bytes)) as img:
                # Force the full decode so truncated files fail here
                img.load()
                return ImageOps.exif_transpose(img)
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            raise DecodeFailedError(f"Cannot decode image: {e}") from e

    def _normalize_mode(self, img: Image.Image) -> Image.Image:
        """Convert to a mode JPEG can store, flattening transparency on white."""
        if img.mode in ("RGB", "L"):
            return img

        if img.mode in ("RGBA", "LA") or (
            img.mode == "P" and "transparency" in img.info
        ):
            rgba = img.convert("RGBA")
            background = Image.new("RGB", rgba.size, THUMBNAIL_BACKGROUND_COLOR)
            background.paste(rgba, mask=rgba.getchannel("A"))
            return background

        return img.convert("RGB")
