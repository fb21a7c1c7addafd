# tests/helpers.py
"""
Image helpers shared by the test suites.
"""

import io

from PIL import Image, ImageDraw


def encode_image(
    size=(400, 200), image_format: str = "JPEG", mode: str = "RGB"
) -> bytes:
    """Encode a simple two-colour test image."""
    color = (200, 30, 30, 128) if mode == "RGBA" else "red"
    img = Image.new(mode, size, color=color)
    draw = ImageDraw.Draw(img)
    draw.rectangle([size[0] // 4, size[1] // 4, size[0] // 2, size[1] // 2], fill="blue")
    buffer = io.BytesIO()
    img.save(buffer, image_format)
    return buffer.getvalue()
