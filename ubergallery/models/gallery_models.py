# ubergallery/models/gallery_models.py
"""
Models handed from the gallery listing to the presentation layer.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ResolvedImageEntry(BaseModel):
    """One listed image with the URL to show as its thumbnail"""

    name: str = Field(..., description="Source image file name")
    thumbnail: str = Field(
        ..., description="URL of the cached thumbnail, or of the original on failure"
    )
    url: str = Field(..., description="URL of the full-size original")
    model_config = ConfigDict(frozen=True)


class GalleryPage(BaseModel):
    """One page of the gallery listing"""

    images: List[ResolvedImageEntry] = Field(
        ..., description="Images on the current page, in listing order"
    )
    total: int = Field(..., description="Total number of listed images")
    page: int = Field(..., description="Current page number (1-based)")
    page_size: int = Field(..., description="Images per page (total when unpaginated)")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="Whether there is a page after this one")
    has_previous: bool = Field(
        ..., description="Whether there is a page before this one"
    )
    paginated: bool = Field(..., description="Whether pagination is active")


class ThumbnailCacheStatsResponse(BaseModel):
    """Thumbnail cache counters since startup"""

    hits: int
    misses: int
    generated: int
    fallbacks: Dict[str, int]
