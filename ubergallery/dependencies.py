# ubergallery/dependencies.py
"""
FastAPI dependency providers.

Services are built once during application startup and stored on
``app.state``; these providers hand them to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Request
from jinja2 import Environment

from .gallery_config import GalleryConfig
from .services.gallery_service import GalleryService
from .services.thumbnail_pipeline import ThumbnailCache


def get_gallery_config(request: Request) -> GalleryConfig:
    return request.app.state.gallery_config


def get_gallery_service(request: Request) -> GalleryService:
    return request.app.state.gallery_service


def get_thumbnail_cache(request: Request) -> ThumbnailCache:
    return request.app.state.thumbnail_cache


def get_templates(request: Request) -> Environment:
    return request.app.state.templates


GalleryConfigDep = Annotated[GalleryConfig, Depends(get_gallery_config)]
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
ThumbnailCacheDep = Annotated[ThumbnailCache, Depends(get_thumbnail_cache)]
TemplatesDep = Annotated[Environment, Depends(get_templates)]
