"""
Services module for UberGallery.

Available Services:
- GalleryService: Directory listing, ordering and pagination
- ThumbnailCache: On-demand thumbnail generation and storage (thumbnail_pipeline)
- Logger: loguru-backed service loggers (logger)
"""
