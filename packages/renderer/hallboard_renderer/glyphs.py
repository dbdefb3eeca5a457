"""Stock glyph table and the built-in 7px digit font."""

from __future__ import annotations

from .font import BitmapFont, GlyphTable
from .models import GLYPH_GAP, GLYPH_HEIGHT, Color
from .pixels import PixelBuffer

FONT_ORDER = "#1234567890"

GLYPH_WIDTHS: dict[str, int] = {
    "#": 6,
    "1": 3,
    "2": 5,
    "3": 4,
    "4": 6,
    "5": 4,
    "6": 5,
    "7": 4,
    "8": 5,
    "9": 5,
    "0": 5,
}

# One string per row, "#" is ink.
GLYPH_ROWS: dict[str, tuple[str, ...]] = {
    "#": (
        ".#..#.",
        "######",
        ".#..#.",
        ".#..#.",
        ".#..#.",
        "######",
        ".#..#.",
    ),
    "1": (
        ".#.",
        "##.",
        ".#.",
        ".#.",
        ".#.",
        ".#.",
        "###",
    ),
    "2": (
        ".###.",
        "#...#",
        "....#",
        "...#.",
        "..#..",
        ".#...",
        "#####",
    ),
    "3": (
        "###.",
        "...#",
        "...#",
        ".##.",
        "...#",
        "...#",
        "###.",
    ),
    "4": (
        "...#..",
        "..##..",
        ".#.#..",
        "#..#..",
        "######",
        "...#..",
        "...#..",
    ),
    "5": (
        "####",
        "#...",
        "###.",
        "...#",
        "...#",
        "#..#",
        ".##.",
    ),
    "6": (
        ".###.",
        "#....",
        "####.",
        "#...#",
        "#...#",
        "#...#",
        ".###.",
    ),
    "7": (
        "####",
        "...#",
        "...#",
        "..#.",
        "..#.",
        ".#..",
        ".#..",
    ),
    "8": (
        ".###.",
        "#...#",
        "#...#",
        ".###.",
        "#...#",
        "#...#",
        ".###.",
    ),
    "9": (
        ".###.",
        "#...#",
        "#...#",
        "#...#",
        ".####",
        "....#",
        ".###.",
    ),
    "0": (
        ".###.",
        "#...#",
        "#..##",
        "#.#.#",
        "##..#",
        "#...#",
        ".###.",
    ),
}

STOCK_TABLE = GlyphTable(FONT_ORDER, GLYPH_WIDTHS, gap=GLYPH_GAP)

_INK = Color(0, 0, 0, 255)
_PAPER = Color(255, 255, 255, 255)


def build_builtin_font(ink: Color = _INK, paper: Color = _PAPER) -> BitmapFont:
    strip = PixelBuffer.new(STOCK_TABLE.span, GLYPH_HEIGHT, paper)
    for char, glyph in STOCK_TABLE.items():
        rows = GLYPH_ROWS[char]
        if len(rows) != GLYPH_HEIGHT or any(len(row) != glyph.width for row in rows):
            raise ValueError(f"Bitmap for glyph {char!r} does not match {glyph.width}x{GLYPH_HEIGHT}")
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                if cell == "#":
                    strip.set(glyph.offset + x, y, ink)
    return BitmapFont(strip, STOCK_TABLE)


def load_font(source: PixelBuffer) -> BitmapFont:
    return BitmapFont(source, STOCK_TABLE)
