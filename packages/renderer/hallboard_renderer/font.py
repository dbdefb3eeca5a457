"""Fixed-height bitmap font over a single glyph strip raster."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .models import GLYPH_GAP, GLYPH_HEIGHT, Glyph
from .pixels import PixelBuffer

logger = logging.getLogger("hallboard.renderer.font")


class GlyphTable(Mapping[str, Glyph]):
    """Immutable char -> glyph table.

    Glyphs sit left to right in ``order`` with a ``gap`` pixel column between
    neighbours, so each offset is the running sum of preceding widths + gaps.
    """

    def __init__(self, order: str, widths: Mapping[str, int], gap: int = GLYPH_GAP) -> None:
        glyphs: dict[str, Glyph] = {}
        offset = 0
        for char in order:
            if char in glyphs:
                raise ValueError(f"Duplicate glyph in font order: {char!r}")
            if char not in widths:
                raise ValueError(f"No width for glyph {char!r}")
            width = int(widths[char])
            if width <= 0:
                raise ValueError(f"Glyph width must be > 0: {char!r}")
            glyphs[char] = Glyph(char=char, width=width, offset=offset)
            offset += width + gap
        self.order = order
        self.gap = gap
        self.span = max(offset - gap, 0)
        self._glyphs = MappingProxyType(glyphs)

    def __getitem__(self, char: str) -> Glyph:
        return self._glyphs[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def lookup(self, char: str) -> Glyph | None:
        return self._glyphs.get(char)


class BitmapFont:
    def __init__(self, source: PixelBuffer, table: GlyphTable, height: int = GLYPH_HEIGHT) -> None:
        if source.width < table.span or source.height < height:
            raise ValueError(
                f"font raster {source.width}x{source.height} too small for glyph strip {table.span}x{height}"
            )
        self.source = source
        self.table = table
        self.height = height

    def lookup(self, char: str) -> Glyph | None:
        return self.table.lookup(char)

    def measure(self, text: str) -> int:
        widths = [glyph.width for glyph in map(self.lookup, text) if glyph is not None]
        if not widths:
            return 0
        return sum(widths) + self.table.gap * (len(widths) - 1)

    def render_text(self, text: str, dest: PixelBuffer, x: int, y: int) -> int:
        """Copy each known glyph onto ``dest`` and return the pixel span drawn.

        Unknown characters are dropped. The span is the sum of glyph widths
        plus one gap between neighbours, with no trailing gap.
        """
        cursor = x
        drawn = 0
        for char in text:
            glyph = self.lookup(char)
            if glyph is None:
                logger.debug("skipping glyph %r", char)
                continue
            dest.blit_region(self.source, glyph.offset, 0, glyph.width, self.height, cursor, y)
            cursor += glyph.width + self.table.gap
            drawn += 1
        if not drawn:
            return 0
        return cursor - x - self.table.gap
