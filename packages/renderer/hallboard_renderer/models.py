"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

GLYPH_HEIGHT = 7
GLYPH_GAP = 1
GRID_GAP = 1
EXTRA_TRAILING_ROWS = 1


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def of(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        for channel in (r, g, b, a):
            if not 0 <= int(channel) <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        return cls(int(r), int(g), int(b), int(a))


@dataclass(frozen=True)
class Glyph:
    char: str
    width: int
    offset: int


@dataclass(frozen=True)
class GridSpec:
    entry_count: int
    entries_per_row: int = 4
    entry_width: int = 32
    entry_height: int = 9
    width: int | None = None

    def __post_init__(self) -> None:
        if self.entry_count < 0:
            raise ValueError("entry_count must be >= 0")
        if self.entries_per_row < 1:
            raise ValueError("entries_per_row must be >= 1")
        if self.entry_width < 3 or self.entry_height < 1:
            raise ValueError("entry cells are too small")

    @property
    def natural_width(self) -> int:
        return self.entries_per_row * self.entry_width + 2

    @property
    def canvas_width(self) -> int:
        return self.width if self.width is not None else self.natural_width


@dataclass(frozen=True)
class Geometry:
    width: int
    height: int
    rows: int
    entry_height: int
    entry_starts: tuple[int, ...]
    row_starts: tuple[int, ...]
    vertical_lines: tuple[int, ...]
    horizontal_lines: tuple[int, ...]
    cell_lefts: tuple[int, ...]
    cell_widths: tuple[int, ...]
