"""Leaderboard panel composer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .borders import BorderRenderer
from .font import BitmapFont
from .layout import compute_layout
from .models import Geometry, GridSpec
from .palettes import PanelPalette, get_palette
from .pixels import PixelBuffer

logger = logging.getLogger("hallboard.renderer.composer")


class LabelOverflowError(IndexError):
    """Raised when an entry label runs past the panel edge."""

    def __init__(self, index: int, text: str) -> None:
        super().__init__(f"label {text!r} for entry {index} does not fit the panel")
        self.index = index
        self.text = text


def format_label(labels: Sequence[int | None], index: int) -> str | None:
    """Return ``"#<value>"`` for a present entry, ``None`` otherwise.

    Zero is falsy and therefore indistinguishable from a missing entry.
    """
    if index >= len(labels):
        return None
    value = labels[index]
    if not value:
        return None
    return f"#{value}"


@dataclass(frozen=True)
class PanelLayout:
    entries_per_row: int = 4
    entry_width: int = 32
    entry_height: int = 9
    width: int | None = None

    def spec_for(self, entry_count: int) -> GridSpec:
        return GridSpec(
            entry_count=entry_count,
            entries_per_row=self.entries_per_row,
            entry_width=self.entry_width,
            entry_height=self.entry_height,
            width=self.width,
        )


class GridComposer:
    """Draws the bordered entry grid and its labels into a fresh buffer."""

    def __init__(
        self,
        font: BitmapFont,
        layout: PanelLayout | None = None,
        palette: PanelPalette | None = None,
    ) -> None:
        self.font = font
        self.layout = layout or PanelLayout()
        self.palette = palette or get_palette(None)
        self.borders = BorderRenderer(self.palette)

    def geometry(self, entry_count: int) -> Geometry:
        return compute_layout(self.layout.spec_for(entry_count))

    def compose(self, labels: Sequence[int | None]) -> PixelBuffer:
        geometry = self.geometry(len(labels))
        canvas = PixelBuffer.new(geometry.width, geometry.height)
        self.borders.draw_grid(canvas, geometry)

        per_row = self.layout.entries_per_row
        drawn = 0
        for row, y in enumerate(geometry.row_starts):
            for col, left in enumerate(geometry.cell_lefts):
                index = row * per_row + col
                text = format_label(labels, index)
                if text is None:
                    continue
                try:
                    self.font.render_text(text, canvas, left + 1, y + 1)
                except IndexError as exc:
                    logger.error("label %r for entry %d does not fit the %dx%d panel", text, index, canvas.width, canvas.height)
                    raise LabelOverflowError(index, text) from exc
                drawn += 1

        # sprites go on top of any glyph rows that reach a separator
        self.borders.draw_intersections(canvas, geometry)

        logger.debug(
            "composed panel %dx%d rows=%d labels=%d",
            geometry.width,
            geometry.height,
            geometry.rows,
            drawn,
        )
        return canvas
