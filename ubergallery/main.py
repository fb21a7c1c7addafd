# ubergallery/main.py
"""
FastAPI application entry point for UberGallery.

Startup loads the gallery INI config (reporting every validation warning),
builds the thumbnail cache and listing service, preloads the theme and mounts
the public directory. Request handling lives in the routers.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings, settings as default_settings
from .constants import PUBLIC_URL_PREFIX
from .enums import LogEmoji, LoggerName, LogLevel, LogSource
from .exceptions import ConfigurationError
from .gallery_config import load_gallery_config
from .middleware import ErrorHandlerMiddleware, RequestLoggerMiddleware
from .routers import gallery_routers as gallery
from .routers import thumbnail_routers as thumbnails
from .services.gallery_service import GalleryService
from .services.logger import get_service_logger, initialize_global_logger
from .services.thumbnail_pipeline import ThumbnailCache
from .utils.static_files import CachedStaticFiles
from .utils.templates import create_template_environment, preload_theme

logger = get_service_logger(LoggerName.SYSTEM, LogSource.SYSTEM)
config_logger = get_service_logger(
    LoggerName.CONFIG, LogSource.CONFIG, default_emoji=LogEmoji.CONFIG
)


def _configure_logging(app_settings: Settings, debugging: bool = False) -> None:
    initialize_global_logger(
        level=LogLevel.DEBUG if debugging else app_settings.log_level,
        enable_console=True,
        enable_file_logging=app_settings.enable_file_logging,
        log_directory=(
            Path(app_settings.log_directory) if app_settings.log_directory else None
        ),
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle application startup and shutdown"""
    app_settings: Settings = _app.state.settings
    _configure_logging(app_settings)

    try:
        gallery_config, warnings = load_gallery_config(app_settings.config_path)
    except ConfigurationError as e:
        logger.error("Cannot start gallery server", exception=e)
        raise
    if gallery_config.enable_debugging:
        _configure_logging(app_settings, debugging=True)

    for warning in warnings:
        config_logger.warning(
            f"Gallery config: {warning.message}",
            extra_context={"section": warning.section, "key": warning.key},
        )

    app_settings.ensure_directories()

    templates = create_template_environment(app_settings.view_path)
    preload_theme(templates, gallery_config.theme_name)

    thumbnail_cache = ThumbnailCache(
        gallery_directory=app_settings.gallery_path,
        cache_directory=app_settings.cache_path,
    )

    _app.state.gallery_config = gallery_config
    _app.state.templates = templates
    _app.state.thumbnail_cache = thumbnail_cache
    _app.state.gallery_service = GalleryService(
        config=gallery_config,
        cache=thumbnail_cache,
        public_root=app_settings.public_path,
    )
    _app.state.static_files.max_age = gallery_config.cache_expiration

    logger.info(
        "Gallery server started",
        emoji=LogEmoji.STARTUP,
        extra_context={
            "gallery_directory": str(app_settings.gallery_path),
            "cache_directory": str(app_settings.cache_path),
            "thumbnail_size": (
                f"{gallery_config.thumbnail_width}x{gallery_config.thumbnail_height}"
            ),
            "theme": gallery_config.theme_name,
            "config_warnings": len(warnings),
        },
    )

    yield

    logger.info("Gallery server shutting down", emoji=LogEmoji.SHUTDOWN)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Process settings (defaults to the environment-derived settings)
    """
    app_settings = app_settings or default_settings

    application = FastAPI(
        title="UberGallery",
        description="Image gallery with an on-demand thumbnail cache",
        version="1.0.0",
        lifespan=lifespan,
    )
    application.state.settings = app_settings

    # Middleware stack (order matters: last added = first executed)
    application.add_middleware(
        RequestLoggerMiddleware, quiet_prefixes=(PUBLIC_URL_PREFIX,)
    )
    application.add_middleware(
        ErrorHandlerMiddleware,
        debug_mode=app_settings.environment == "development",
    )

    application.include_router(gallery.router)
    application.include_router(thumbnails.router, prefix="/api")

    static_files = CachedStaticFiles(
        directory=str(app_settings.public_path), check_dir=False
    )
    application.state.static_files = static_files
    application.mount(PUBLIC_URL_PREFIX, static_files, name="public")

    @application.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "version": "1.0.0"}

    return application


app = create_app()


def main() -> None:
    uvicorn.run(
        "ubergallery.main:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
