# ubergallery/utils/static_files.py
"""
Static file serving for the public directory.
"""

from starlette.responses import Response
from starlette.staticfiles import StaticFiles


class CachedStaticFiles(StaticFiles):
    """
    StaticFiles that adds a Cache-Control max-age to every file response.

    ``max_age`` may be changed after mounting; 0 leaves responses without a
    Cache-Control header.
    """

    def __init__(self, *args, max_age: int = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_age = max_age

    def file_response(self, *args, **kwargs) -> Response:
        response = super().file_response(*args, **kwargs)
        if self.max_age > 0:
            response.headers["Cache-Control"] = f"public, max-age={self.max_age}"
        return response
