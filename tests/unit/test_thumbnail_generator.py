#!/usr/bin/env python3
"""
Unit tests for ThumbnailGenerator.

Tests the core thumbnail generation functionality including:
- Fit-within-box resizing that preserves aspect ratio
- Quality clamping
- Mode conversion for JPEG output
- Error handling for undecodable input
"""

import io

import pytest
from PIL import Image

from tests.helpers import encode_image
from ubergallery.exceptions import DecodeFailedError, GenerationError
from ubergallery.services.thumbnail_pipeline import (
    ThumbnailGenerator,
    calculate_thumbnail_dimensions,
    clamp_quality,
)


def _open(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


@pytest.mark.unit
@pytest.mark.thumbnail
class TestThumbnailGenerator:
    """Test suite for ThumbnailGenerator component."""

    @pytest.fixture
    def generator(self):
        return ThumbnailGenerator()

    # ============================================================================
    # RESIZING TESTS
    # ============================================================================

    def test_wide_image_is_bounded_not_stretched(self, generator):
        data = generator.generate(encode_image((400, 200)), 100, 100, 80)

        img = _open(data)
        assert img.format == "JPEG"
        assert img.size == (100, 50)

    def test_tall_image_is_bounded_by_height(self, generator):
        data = generator.generate(encode_image((150, 600)), 100, 100, 80)

        assert _open(data).size == (25, 100)

    def test_small_image_is_not_enlarged(self, generator):
        data = generator.generate(encode_image((40, 30)), 100, 100, 80)

        assert _open(data).size == (40, 30)

    def test_extreme_aspect_ratio_keeps_one_pixel(self):
        assert calculate_thumbnail_dimensions((10000, 10), (100, 100)) == (100, 1)

    @pytest.mark.parametrize("bounds", [(0, 100), (100, 0), (-1, 50)])
    def test_non_positive_bounds_raise(self, generator, bounds):
        with pytest.raises(GenerationError):
            generator.generate(encode_image(), bounds[0], bounds[1], 80)

    # ============================================================================
    # QUALITY TESTS
    # ============================================================================

    def test_quality_is_clamped(self):
        assert clamp_quality(-5) == 0
        assert clamp_quality(150) == 100
        assert clamp_quality(42) == 42

    def test_out_of_range_quality_matches_bounds(self, generator):
        source = encode_image((300, 300))

        assert generator.generate(source, 100, 100, -5) == generator.generate(
            source, 100, 100, 0
        )
        assert generator.generate(source, 100, 100, 150) == generator.generate(
            source, 100, 100, 100
        )

    def test_lower_quality_produces_smaller_output(self, generator):
        source = encode_image((800, 600))

        low = generator.generate(source, 400, 400, 10)
        high = generator.generate(source, 400, 400, 95)

        assert len(low) < len(high)

    # ============================================================================
    # FORMAT TESTS
    # ============================================================================

    def test_png_with_alpha_is_encoded_as_rgb_jpeg(self, generator):
        source = encode_image((200, 200), image_format="PNG", mode="RGBA")

        img = _open(generator.generate(source, 50, 50, 80))

        assert img.format == "JPEG"
        assert img.mode == "RGB"
        assert img.size == (50, 50)

    def test_generation_is_deterministic(self, generator):
        source = encode_image((640, 480), image_format="PNG")

        assert generator.generate(source, 120, 90, 70) == generator.generate(
            source, 120, 90, 70
        )

    # ============================================================================
    # ERROR HANDLING TESTS
    # ============================================================================

    def test_non_image_bytes_raise_decode_failed(self, generator):
        with pytest.raises(DecodeFailedError):
            generator.generate(b"definitely not an image", 100, 100, 80)

    def test_truncated_image_raises_decode_failed(self, generator):
        source = encode_image((400, 400))

        with pytest.raises(DecodeFailedError):
            generator.generate(source[: len(source) // 2], 100, 100, 80)

    def test_decode_failure_is_a_generation_error(self):
        assert issubclass(DecodeFailedError, GenerationError)
