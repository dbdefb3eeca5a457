"""Border, fill and intersection painting for the grid panel."""

from __future__ import annotations

import logging

from .models import Color, Geometry
from .palettes import PanelPalette
from .pixels import PixelBuffer

logger = logging.getLogger("hallboard.renderer.borders")

BOTTOM_BORDER_THICKNESS = 2

# (dx, dy, is_centre)
_SPRITE_CELLS = tuple((dx, dy, dx == 0 and dy == 0) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


def adjust_intersection(x: int, y: int, width: int, height: int) -> tuple[int, int]:
    """Move a line crossing to where its sprite centre is painted.

    Left and right edges pull the centre inwards. Both top and bottom edges
    push it up: the top sprite is meant to lose its first row off-canvas.
    """
    ax, ay = x, y
    if x == 0:
        ax = x + 1
    if x == width - 1:
        ax = x - 1
    if y == 0:
        ay = y - 1
    if y == height - 1:
        ay = y - 1
    return ax, ay


class BorderRenderer:
    def __init__(self, palette: PanelPalette) -> None:
        self.palette = palette

    def draw_grid(self, canvas: PixelBuffer, geometry: Geometry) -> None:
        """Frame, row fills and separators; intersections are painted separately."""
        self.draw_frame(canvas)
        for row in range(geometry.rows):
            self.draw_row(canvas, geometry, row)

    def draw_frame(self, canvas: PixelBuffer) -> None:
        border = self.palette.border
        canvas.fill_rect(0, 0, 1, canvas.height, border)
        canvas.fill_rect(canvas.width - 1, 0, 1, canvas.height, border)
        canvas.fill_rect(0, canvas.height - BOTTOM_BORDER_THICKNESS, canvas.width, BOTTOM_BORDER_THICKNESS, border)

    def draw_row(self, canvas: PixelBuffer, geometry: Geometry, row: int) -> None:
        border, fill = self.palette.border, self.palette.fill
        y = geometry.row_starts[row]
        entry_height = geometry.entry_height

        canvas.fill_rect(1, y, 1, entry_height, border)
        for col, (left, width) in enumerate(zip(geometry.cell_lefts, geometry.cell_widths)):
            if col > 0:
                canvas.fill_rect(geometry.vertical_lines[col], y, 1, entry_height, border)
            canvas.fill_rect(left, y, width, entry_height, fill)
        right = geometry.cell_lefts[-1] + geometry.cell_widths[-1]
        canvas.fill_rect(right, y, 1, entry_height, border)

        if row < geometry.rows - 1:
            canvas.fill_rect(1, y + entry_height, canvas.width - 2, 1, border)

    def draw_intersections(self, canvas: PixelBuffer, geometry: Geometry) -> None:
        for y in geometry.horizontal_lines:
            for x in geometry.vertical_lines:
                cx, cy = adjust_intersection(x, y, canvas.width, canvas.height)
                self.draw_sprite(canvas, cx, cy)
        logger.debug(
            "painted %d intersections",
            len(geometry.horizontal_lines) * len(geometry.vertical_lines),
        )

    def draw_sprite(self, canvas: PixelBuffer, cx: int, cy: int) -> None:
        for dx, dy, centre in _SPRITE_CELLS:
            px, py = cx + dx, cy + dy
            if not canvas.contains(px, py):
                continue
            color: Color = self.palette.accent if centre else self.palette.border
            canvas.set(px, py, color)
