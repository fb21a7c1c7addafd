#!/usr/bin/env python3
"""
Unit tests for gallery config parsing.
"""

import pytest

from ubergallery.enums import ImageSortBy
from ubergallery.exceptions import ConfigurationError
from ubergallery.gallery_config import (
    GalleryConfig,
    load_gallery_config,
    parse_gallery_config,
)

FULL_CONFIG = """
[basic_settings]
cache_expiration    = 3600
enable_pagination   = true
paginator_threshold = 10
thumbnail_width     = 160
thumbnail_height    = 120
thumbnail_quality   = 85
theme_name          = default

[advanced_settings]
images_per_page  = 12
images_sort_by   = modified
reverse_sort     = true
enable_debugging = false
"""


def _keys(warnings):
    return [warning.key for warning in warnings]


@pytest.mark.unit
class TestParseGalleryConfig:
    def test_full_config_is_parsed(self):
        config, warnings = parse_gallery_config(FULL_CONFIG)

        assert warnings == []
        assert config == GalleryConfig(
            cache_expiration=3600,
            enable_pagination=True,
            paginator_threshold=10,
            images_per_page=12,
            thumbnail_width=160,
            thumbnail_height=120,
            thumbnail_quality=85,
            theme_name="default",
            images_sort_by=ImageSortBy.MODIFIED,
            reverse_sort=True,
            enable_debugging=False,
        )

    def test_empty_file_yields_defaults(self):
        config, warnings = parse_gallery_config("")

        assert config == GalleryConfig()
        assert warnings == []

    def test_only_literal_true_enables_a_flag(self):
        config, _ = parse_gallery_config(
            "[basic_settings]\nenable_pagination = yes\n"
            "[advanced_settings]\nreverse_sort = true\n"
        )

        assert config.enable_pagination is False
        assert config.reverse_sort is True

    def test_unparseable_integer_becomes_zero_with_warning(self):
        config, warnings = parse_gallery_config(
            "[basic_settings]\nthumbnail_width = wide\n"
        )

        assert config.thumbnail_width == 0
        assert _keys(warnings) == ["thumbnail_width"]

    def test_negative_dimension_becomes_zero_with_warning(self):
        config, warnings = parse_gallery_config(
            "[basic_settings]\nthumbnail_height = -20\n"
        )

        assert config.thumbnail_height == 0
        assert _keys(warnings) == ["thumbnail_height"]

    @pytest.mark.parametrize("raw, expected", [("-5", 0), ("150", 100), ("0", 0)])
    def test_quality_is_clamped(self, raw, expected):
        config, warnings = parse_gallery_config(
            f"[basic_settings]\nthumbnail_quality = {raw}\n"
        )

        assert config.thumbnail_quality == expected
        assert len(warnings) == (0 if raw == "0" else 1)

    def test_unknown_sort_order_falls_back_to_name(self):
        config, warnings = parse_gallery_config(
            "[advanced_settings]\nimages_sort_by = size\n"
        )

        assert config.images_sort_by is ImageSortBy.NAME
        assert _keys(warnings) == ["images_sort_by"]

    def test_unknown_keys_and_sections_are_reported(self):
        config, warnings = parse_gallery_config(
            "[basic_settings]\nfancy_mode = true\n[plugins]\nfoo = bar\n"
        )

        assert config == GalleryConfig()
        assert [(w.section, w.key) for w in warnings] == [
            ("basic_settings", "fancy_mode"),
            ("plugins", ""),
        ]

    def test_default_section_is_ignored(self):
        config, warnings = parse_gallery_config(
            "[DEFAULT]\nthumbnail_width = 999\n"
            "[basic_settings]\nthumbnail_height = 50\n"
        )

        assert config.thumbnail_width == GalleryConfig().thumbnail_width
        assert config.thumbnail_height == 50
        assert warnings == []

    def test_keys_before_first_section_are_ignored(self):
        config, warnings = parse_gallery_config(
            "thumbnail_width = 999\n[basic_settings]\n"
        )

        assert config.thumbnail_width == GalleryConfig().thumbnail_width
        assert warnings == []

    def test_inline_comments_are_stripped(self):
        config, warnings = parse_gallery_config(
            "[basic_settings]\n"
            "thumbnail_width = 150 ; pixels\n"
            "thumbnail_quality = 80 # jpeg\n"
            "theme_name = default ; bundled theme\n"
        )

        assert config.thumbnail_width == 150
        assert config.thumbnail_quality == 80
        assert config.theme_name == "default"
        assert warnings == []

    def test_comment_prefix_without_whitespace_is_part_of_value(self):
        config, _ = parse_gallery_config("[basic_settings]\ntheme_name = dark#2\n")

        assert config.theme_name == "dark#2"

    def test_invalid_syntax_raises(self):
        with pytest.raises(ConfigurationError):
            parse_gallery_config("[basic_settings\nthumbnail_width = 10\n")


@pytest.mark.unit
class TestLoadGalleryConfig:
    def test_loads_file_from_disk(self, tmp_path):
        path = tmp_path / "galleryConfig.ini"
        path.write_text(FULL_CONFIG, encoding="utf-8")

        config, warnings = load_gallery_config(path)

        assert config.thumbnail_width == 160
        assert warnings == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_gallery_config(tmp_path / "missing.ini")

    def test_config_is_immutable(self):
        config = GalleryConfig()

        with pytest.raises(Exception):
            config.thumbnail_width = 5
