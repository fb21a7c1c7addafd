# ubergallery/routers/thumbnail_routers.py
"""
Thumbnail cache HTTP endpoints.

Role: Expose thumbnail cache activity for monitoring
"""

from fastapi import APIRouter

from ..dependencies import ThumbnailCacheDep
from ..models.gallery_models import ThumbnailCacheStatsResponse

router = APIRouter(tags=["thumbnails"])


@router.get("/thumbnails/stats", response_model=ThumbnailCacheStatsResponse)
async def get_thumbnail_stats(thumbnail_cache: ThumbnailCacheDep):
    """Return hit, miss, generation and fallback counters since startup"""
    return ThumbnailCacheStatsResponse(**thumbnail_cache.stats.snapshot())
