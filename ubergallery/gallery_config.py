# ubergallery/gallery_config.py
"""
Gallery configuration loaded from the INI file.

The file is parsed and validated once. Malformed values never abort startup:
each problem is recorded as a ``ConfigWarning`` and the field falls back to a
safe value (0 for unparseable integers, the nearest bound for an out of range
quality). The caller decides how to report the collected warnings.
"""

import configparser
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    CONFIG_SECTION_ADVANCED,
    CONFIG_SECTION_BASIC,
    CONFIG_TRUE_LITERAL,
    DEFAULT_CACHE_EXPIRATION,
    DEFAULT_IMAGE_SORT_BY,
    DEFAULT_IMAGES_PER_PAGE,
    DEFAULT_PAGINATOR_THRESHOLD,
    DEFAULT_THEME_NAME,
    DEFAULT_THUMBNAIL_HEIGHT,
    DEFAULT_THUMBNAIL_QUALITY,
    DEFAULT_THUMBNAIL_WIDTH,
    MAX_THUMBNAIL_QUALITY,
    MIN_THUMBNAIL_QUALITY,
)
from .enums import ImageSortBy
from .exceptions import ConfigurationError

# configparser treats its default section specially; use a name no gallery
# file will contain so "[DEFAULT]" is parsed as an ordinary, ignored section
_PARSER_DEFAULT_SECTION = "__ubergallery_parser_defaults__"
_IGNORED_SECTION = "DEFAULT"

# "key = 150 ; pixels" keeps only "150"; a prefix counts after whitespace only
INLINE_COMMENT_PREFIXES = (";", "#")


class ConfigWarning(BaseModel):
    """A single problem found while loading the gallery config."""

    section: str
    key: str = ""
    message: str


class GalleryConfig(BaseModel):
    """Typed gallery configuration passed to the cache and listing."""

    cache_expiration: int = Field(
        default=DEFAULT_CACHE_EXPIRATION,
        description="max-age in seconds for served public files (0 disables)",
    )
    enable_pagination: bool = False
    paginator_threshold: int = DEFAULT_PAGINATOR_THRESHOLD
    images_per_page: int = DEFAULT_IMAGES_PER_PAGE

    thumbnail_width: int = DEFAULT_THUMBNAIL_WIDTH
    thumbnail_height: int = DEFAULT_THUMBNAIL_HEIGHT
    thumbnail_quality: int = Field(
        default=DEFAULT_THUMBNAIL_QUALITY,
        ge=MIN_THUMBNAIL_QUALITY,
        le=MAX_THUMBNAIL_QUALITY,
    )
    theme_name: str = DEFAULT_THEME_NAME

    images_sort_by: ImageSortBy = DEFAULT_IMAGE_SORT_BY
    reverse_sort: bool = False

    enable_debugging: bool = False

    model_config = ConfigDict(frozen=True)


class _ConfigReader:
    """Collects typed values and warnings for one config file."""

    def __init__(self):
        self.values: Dict[str, object] = {}
        self.warnings: List[ConfigWarning] = []

    def warn(self, section: str, key: str, message: str) -> None:
        self.warnings.append(ConfigWarning(section=section, key=key, message=message))

    def boolean(self, section: str, key: str, raw: str) -> None:
        self.values[key] = raw.strip() == CONFIG_TRUE_LITERAL

    def integer(self, section: str, key: str, raw: str) -> None:
        try:
            self.values[key] = int(raw.strip())
        except ValueError:
            self.warn(section, key, f"'{key}' unable to parse integer: {raw!r}; set to 0")
            self.values[key] = 0

    def dimension(self, section: str, key: str, raw: str) -> None:
        self.integer(section, key, raw)
        if self.values[key] < 0:
            self.warn(section, key, f"'{key}' must be >= 0; set to 0")
            self.values[key] = 0

    def quality(self, section: str, key: str, raw: str) -> None:
        self.integer(section, key, raw)
        value = self.values[key]
        if value < MIN_THUMBNAIL_QUALITY:
            self.warn(
                section,
                key,
                f"'{key}' must be >= {MIN_THUMBNAIL_QUALITY}; set to {MIN_THUMBNAIL_QUALITY}",
            )
            self.values[key] = MIN_THUMBNAIL_QUALITY
        elif value > MAX_THUMBNAIL_QUALITY:
            self.warn(
                section,
                key,
                f"'{key}' must be <= {MAX_THUMBNAIL_QUALITY}; set to {MAX_THUMBNAIL_QUALITY}",
            )
            self.values[key] = MAX_THUMBNAIL_QUALITY

    def text(self, section: str, key: str, raw: str) -> None:
        self.values[key] = raw.strip()

    def sort_by(self, section: str, key: str, raw: str) -> None:
        try:
            self.values[key] = ImageSortBy(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in ImageSortBy)
            self.warn(
                section,
                key,
                f"'{key}' must be one of: {allowed}; set to {DEFAULT_IMAGE_SORT_BY.value}",
            )
            self.values[key] = DEFAULT_IMAGE_SORT_BY


_KeyHandler = Callable[[_ConfigReader, str, str, str], None]

_SECTION_KEYS: Dict[str, Dict[str, _KeyHandler]] = {
    CONFIG_SECTION_BASIC: {
        "cache_expiration": _ConfigReader.integer,
        "enable_pagination": _ConfigReader.boolean,
        "paginator_threshold": _ConfigReader.integer,
        "thumbnail_width": _ConfigReader.dimension,
        "thumbnail_height": _ConfigReader.dimension,
        "thumbnail_quality": _ConfigReader.quality,
        "theme_name": _ConfigReader.text,
    },
    CONFIG_SECTION_ADVANCED: {
        "images_per_page": _ConfigReader.integer,
        "images_sort_by": _ConfigReader.sort_by,
        "reverse_sort": _ConfigReader.boolean,
        "enable_debugging": _ConfigReader.boolean,
    },
}


def parse_gallery_config(content: str) -> Tuple[GalleryConfig, List[ConfigWarning]]:
    """
    Parse INI text into a GalleryConfig.

    Args:
        content: INI file contents

    Returns:
        Tuple of (config, warnings collected while parsing)

    Raises:
        ConfigurationError: If the text is not valid INI syntax
    """
    parser = configparser.ConfigParser(
        default_section=_PARSER_DEFAULT_SECTION,
        interpolation=None,
        strict=False,
        inline_comment_prefixes=INLINE_COMMENT_PREFIXES,
    )
    try:
        # Keys before the first header belong to the ignored DEFAULT section
        parser.read_string(f"[{_IGNORED_SECTION}]\n{content}")
    except configparser.Error as e:
        raise ConfigurationError(f"Invalid gallery config syntax: {e}") from e

    reader = _ConfigReader()
    for section in parser.sections():
        if section == _IGNORED_SECTION:
            continue

        handlers = _SECTION_KEYS.get(section)
        if handlers is None:
            reader.warn(section, "", f"unsupported section: {section}")
            continue

        for key, raw in parser.items(section):
            handler = handlers.get(key)
            if handler is None:
                reader.warn(section, key, f"unsupported key: {key}")
                continue
            handler(reader, section, key, raw)

    return GalleryConfig(**reader.values), reader.warnings


def load_gallery_config(path: Path) -> Tuple[GalleryConfig, List[ConfigWarning]]:
    """
    Read and parse the gallery INI file.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid INI
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read gallery config {path}: {e}") from e

    return parse_gallery_config(content)
