# ubergallery/services/gallery_service.py
"""
Gallery listing service.

Enumerates the gallery directory (non-recursive), orders and paginates the
images, and asks the thumbnail cache for one thumbnail per image on the
requested page.
"""

import asyncio
import math
import os
from pathlib import Path
from typing import List, Optional, Tuple

from ..constants import PUBLIC_URL_PREFIX
from ..enums import ImageSortBy, LogEmoji, LoggerName, LogSource
from ..exceptions import GalleryDirectoryError
from ..gallery_config import GalleryConfig
from ..models.gallery_models import GalleryPage, ResolvedImageEntry
from ..utils.file_helpers import to_public_url
from .logger import get_service_logger
from .thumbnail_pipeline import ThumbnailCache

logger = get_service_logger(LoggerName.GALLERY_SERVICE, LogSource.API)


class GalleryService:
    """Builds gallery pages from the source directory and the thumbnail cache."""

    def __init__(
        self,
        config: GalleryConfig,
        cache: ThumbnailCache,
        public_root: Path,
        url_prefix: str = PUBLIC_URL_PREFIX,
    ):
        self.config = config
        self.cache = cache
        self.public_root = Path(public_root)
        self.url_prefix = url_prefix

    def list_source_images(self) -> List[str]:
        """
        List source image file names in display order.

        Subdirectories and hidden entries are skipped, as are entries that
        vanish between enumeration and their stat call.

        Raises:
            GalleryDirectoryError: If the gallery directory cannot be enumerated
        """
        directory = self.cache.gallery_directory
        files: List[Tuple[str, float]] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.name.startswith(".") or entry.is_dir():
                        continue
                    mtime = self._entry_mtime(entry)
                    if mtime is not None:
                        files.append((entry.name, mtime))
        except OSError as e:
            logger.error(
                f"Cannot read gallery directory {directory}",
                exception=e,
                error_context={"operation": "gallery_list", "directory": str(directory)},
            )
            raise GalleryDirectoryError(
                f"Cannot read gallery directory {directory}: {e}"
            ) from e

        if self._sort_by_mtime:
            files.sort(key=lambda item: (item[1], item[0]))
        else:
            files.sort(key=lambda item: item[0])

        names = [name for name, _ in files]
        if self.config.reverse_sort:
            names.reverse()
        return names

    @property
    def _sort_by_mtime(self) -> bool:
        return self.config.images_sort_by == ImageSortBy.MODIFIED

    def _entry_mtime(self, entry: os.DirEntry) -> Optional[float]:
        """Modification time used for ordering, or None if the entry is gone."""
        if not self._sort_by_mtime:
            return 0.0
        try:
            return entry.stat(follow_symlinks=False).st_mtime
        except OSError as e:
            logger.debug(
                f"Skipping {entry.name}: {e}",
                extra_context={"operation": "gallery_list", "filename": entry.name},
            )
            return None

    def is_paginated(self, total: int) -> bool:
        return (
            self.config.enable_pagination
            and self.config.images_per_page > 0
            and total > self.config.paginator_threshold
        )

    async def get_page(self, page: int = 1) -> GalleryPage:
        """
        Build one page of the gallery, resolving a thumbnail for each image.

        Pages outside the valid range are clamped to the first or last page.

        Args:
            page: Requested page number (1-based)

        Returns:
            GalleryPage with entries in listing order

        Raises:
            GalleryDirectoryError: If the gallery directory cannot be enumerated
        """
        names = self.list_source_images()
        total = len(names)

        if self.is_paginated(total):
            page_size = self.config.images_per_page
            total_pages = math.ceil(total / page_size)
            page = min(max(page, 1), total_pages)
            start = (page - 1) * page_size
            page_names = names[start : start + page_size]
            paginated = True
        else:
            page_size = total
            total_pages = 1
            page = 1
            page_names = names
            paginated = False

        images = await self.resolve_entries(page_names)

        logger.debug(
            f"Listed {len(images)} of {total} images",
            emoji=LogEmoji.IMAGE,
            extra_context={"operation": "gallery_list", "page": page, "total": total},
        )

        return GalleryPage(
            images=images,
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
            paginated=paginated,
        )

    async def resolve_entries(self, names: List[str]) -> List[ResolvedImageEntry]:
        """Resolve thumbnails for the given names, keeping their order."""
        config = self.config
        thumbnail_paths = await asyncio.gather(
            *(
                self.cache.resolve_async(
                    name,
                    config.thumbnail_width,
                    config.thumbnail_height,
                    config.thumbnail_quality,
                )
                for name in names
            )
        )

        return [
            ResolvedImageEntry(
                name=name,
                thumbnail=self._url_for(thumbnail_path),
                url=self._url_for(self.cache.source_path(name)),
            )
            for name, thumbnail_path in zip(names, thumbnail_paths)
        ]

    def _url_for(self, path: Path) -> str:
        return to_public_url(path, self.public_root, self.url_prefix)
