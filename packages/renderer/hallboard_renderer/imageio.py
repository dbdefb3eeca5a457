"""PNG load/save helpers for pixel buffers."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from PIL import Image

from .pixels import PixelBuffer


def load_rgba(path: Path) -> PixelBuffer:
    with Image.open(path) as image:
        return PixelBuffer.from_image(image)


def save_png(buffer: PixelBuffer, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    buffer.to_image().save(path, format="PNG")
    return path


def preview_data_url(buffer: PixelBuffer) -> str:
    buf = BytesIO()
    buffer.to_image().save(buf, format="PNG")
    import base64

    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:image/png;base64,{b64}"
