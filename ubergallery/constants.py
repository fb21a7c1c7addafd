# ubergallery/constants.py
"""
Global Constants for UberGallery

Centralized location for all application constants to avoid hardcoded values
throughout the codebase.
"""

from pathlib import Path

from .enums import ImageSortBy

# =============================================================================
# FILESYSTEM LAYOUT
# =============================================================================

DEFAULT_PUBLIC_DIRECTORY = "./public"
# Bundled themes; override with UBERGALLERY_VIEW_DIRECTORY
DEFAULT_VIEW_DIRECTORY = str(Path(__file__).parent / "views")
GALLERY_DIRECTORY_NAME = "gallery-images"
CACHE_DIRECTORY_NAME = "cache"
PUBLIC_URL_PREFIX = "/public"

CONFIG_FILENAME = "galleryConfig.ini"

# Artifact names are "{width}x{height}-{filename}"
ARTIFACT_NAME_TEMPLATE = "{width}x{height}-{filename}"
ARTIFACT_NAME_PATTERN = r"^(?P<width>\d+)x(?P<height>\d+)-(?P<filename>.+)$"

# Prefix for in-flight artifact writes; never matches ARTIFACT_NAME_PATTERN
TEMP_ARTIFACT_PREFIX = ".tmp-"

# =============================================================================
# SERVER
# =============================================================================

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080

# =============================================================================
# THUMBNAIL GENERATION
# =============================================================================

THUMBNAIL_FORMAT = "JPEG"
MIN_THUMBNAIL_QUALITY = 0
MAX_THUMBNAIL_QUALITY = 100

# White background used when flattening transparent images for JPEG
THUMBNAIL_BACKGROUND_COLOR = (255, 255, 255)

# =============================================================================
# GALLERY CONFIG DEFAULTS
# =============================================================================

DEFAULT_THUMBNAIL_WIDTH = 100
DEFAULT_THUMBNAIL_HEIGHT = 100
DEFAULT_THUMBNAIL_QUALITY = 75
DEFAULT_THEME_NAME = "default"
DEFAULT_IMAGES_PER_PAGE = 0
DEFAULT_PAGINATOR_THRESHOLD = 0
DEFAULT_CACHE_EXPIRATION = 0
DEFAULT_IMAGE_SORT_BY = ImageSortBy.NAME

CONFIG_SECTION_BASIC = "basic_settings"
CONFIG_SECTION_ADVANCED = "advanced_settings"
CONFIG_TRUE_LITERAL = "true"
