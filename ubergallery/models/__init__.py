from .gallery_models import GalleryPage, ResolvedImageEntry, ThumbnailCacheStatsResponse

__all__ = ["GalleryPage", "ResolvedImageEntry", "ThumbnailCacheStatsResponse"]
