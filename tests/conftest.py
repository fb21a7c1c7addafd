#!/usr/bin/env python3
# tests/conftest.py
"""
Pytest configuration and shared fixtures for UberGallery tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from ubergallery.gallery_config import GalleryConfig
from ubergallery.services.thumbnail_pipeline import ThumbnailCache, ThumbnailGenerator

from .helpers import encode_image


@pytest.fixture
def public_root(tmp_path) -> Path:
    root = tmp_path / "public"
    (root / "gallery-images").mkdir(parents=True)
    return root


@pytest.fixture
def gallery_dir(public_root) -> Path:
    return public_root / "gallery-images"


@pytest.fixture
def cache_dir(public_root) -> Path:
    return public_root / "cache"


@pytest.fixture
def add_image(gallery_dir) -> Callable[..., Path]:
    """Write a test image into the gallery directory."""

    def _add(name: str, size=(400, 200), image_format: str = "JPEG") -> Path:
        path = gallery_dir / name
        path.write_bytes(encode_image(size, image_format))
        return path

    return _add


@pytest.fixture
def thumbnail_cache(gallery_dir, cache_dir) -> ThumbnailCache:
    return ThumbnailCache(gallery_dir, cache_dir, ThumbnailGenerator())


@pytest.fixture
def gallery_config() -> GalleryConfig:
    return GalleryConfig(thumbnail_width=100, thumbnail_height=100, thumbnail_quality=75)
