# ubergallery/routers/gallery_routers.py
"""
Gallery HTTP endpoints.

Role: Gallery index page and JSON listing
Responsibilities: Parse paging parameters, render the theme, map directory errors
Interactions: Uses GalleryService for listing and thumbnail resolution
"""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from ..dependencies import GalleryConfigDep, GalleryServiceDep, TemplatesDep
from ..exceptions import GalleryDirectoryError
from ..models.gallery_models import GalleryPage
from ..utils.router_helpers import handle_exceptions
from ..utils.templates import ERROR_TEMPLATE, theme_template_name

GALLERY_TITLE = "Gallery"

router = APIRouter(tags=["gallery"])


@router.get("/", response_class=HTMLResponse)
async def gallery_index(
    gallery_service: GalleryServiceDep,
    gallery_config: GalleryConfigDep,
    templates: TemplatesDep,
    page: int = Query(1, description="Page number (1-based, clamped to the valid range)"),
):
    """
    Render the gallery page with the configured theme.

    A gallery directory that cannot be read renders the error page with
    status 500; every listed image always renders, with its original as the
    thumbnail when no thumbnail could be produced.
    """
    try:
        gallery_page = await gallery_service.get_page(page)
    except GalleryDirectoryError as e:
        html = templates.get_template(ERROR_TEMPLATE).render(message=str(e))
        return HTMLResponse(content=html, status_code=500)

    html = templates.get_template(theme_template_name(gallery_config.theme_name)).render(
        title=GALLERY_TITLE,
        gallery=gallery_page,
        images=gallery_page.images,
        thumbnail_width=gallery_config.thumbnail_width,
        thumbnail_height=gallery_config.thumbnail_height,
    )
    return HTMLResponse(content=html)


@router.get("/api/images", response_model=GalleryPage)
@handle_exceptions("list gallery images")
async def list_gallery_images(
    gallery_service: GalleryServiceDep,
    page: int = Query(1, description="Page number (1-based, clamped to the valid range)"),
):
    """
    Return one page of the gallery listing as JSON.

    Returns:
        GalleryPage with (name, thumbnail, url) entries in listing order
    """
    try:
        return await gallery_service.get_page(page)
    except GalleryDirectoryError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
