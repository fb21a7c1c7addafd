"""
UberGallery: an image gallery server with an on-demand thumbnail cache.
"""

__version__ = "1.0.0"
