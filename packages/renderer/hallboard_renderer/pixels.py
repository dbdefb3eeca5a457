"""RGBA pixel buffer with clipped fills and fail-fast blits."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .models import Color


class PixelBuffer:
    """Fixed-size RGBA raster stored row-major as ``(height, width, 4)`` uint8.

    Decorative writes go through :meth:`fill_rect`, which clips silently.
    Data copies go through :meth:`blit` / :meth:`blit_region`, which raise
    ``IndexError`` when the destination rectangle does not fit.
    """

    __slots__ = ("width", "height", "pixels")

    def __init__(self, width: int, height: int, pixels: np.ndarray | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width/height must be > 0")
        self.width = width
        self.height = height
        if pixels is None:
            pixels = np.zeros((height, width, 4), dtype=np.uint8)
        elif pixels.shape != (height, width, 4):
            raise ValueError(f"pixel array shape mismatch: got {pixels.shape} expected {(height, width, 4)}")
        self.pixels = pixels

    @classmethod
    def new(cls, width: int, height: int, fill: Color | None = None) -> "PixelBuffer":
        buf = cls(width, height)
        if fill is not None:
            buf.pixels[:, :] = fill
        return buf

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(f"RGBA data size mismatch: got {len(data)} expected {expected}")
        arr = np.frombuffer(data, dtype=np.uint8).reshape((height, width, 4)).copy()
        return cls(width, height, arr)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        arr = np.array(image, dtype=np.uint8)
        return cls(image.width, image.height, arr)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.pixels.copy())

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return Color(r, g, b, a)

    def set(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        self.pixels[y, x] = color

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = color

    def blit(self, src: "PixelBuffer", dst_x: int, dst_y: int) -> None:
        self.blit_region(src, 0, 0, src.width, src.height, dst_x, dst_y)

    def blit_region(
        self,
        src: "PixelBuffer",
        src_x: int,
        src_y: int,
        w: int,
        h: int,
        dst_x: int,
        dst_y: int,
    ) -> None:
        if src_x < 0 or src_y < 0 or src_x + w > src.width or src_y + h > src.height:
            raise IndexError(f"source rect ({src_x}, {src_y}, {w}, {h}) outside {src.width}x{src.height}")
        if dst_x < 0 or dst_y < 0 or dst_x + w > self.width or dst_y + h > self.height:
            raise IndexError(f"destination rect ({dst_x}, {dst_y}, {w}, {h}) outside {self.width}x{self.height}")
        self.pixels[dst_y : dst_y + h, dst_x : dst_x + w] = src.pixels[src_y : src_y + h, src_x : src_x + w]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.width == other.width and self.height == other.height and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
