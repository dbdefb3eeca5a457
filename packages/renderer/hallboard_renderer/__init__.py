"""Renderer package for Hallboard leaderboard panels."""

from .borders import BorderRenderer, adjust_intersection
from .composer import GridComposer, LabelOverflowError, PanelLayout, format_label
from .compositor import overlay
from .font import BitmapFont, GlyphTable
from .glyphs import FONT_ORDER, GLYPH_WIDTHS, STOCK_TABLE, build_builtin_font, load_font
from .imageio import load_rgba, preview_data_url, save_png
from .layout import compute_layout, row_count
from .models import EXTRA_TRAILING_ROWS, GLYPH_HEIGHT, Color, Geometry, Glyph, GridSpec
from .palettes import DEFAULT_PALETTE_NAME, PanelPalette, get_palette, list_palettes
from .pixels import PixelBuffer

__all__ = [
    "BitmapFont",
    "BorderRenderer",
    "Color",
    "DEFAULT_PALETTE_NAME",
    "EXTRA_TRAILING_ROWS",
    "FONT_ORDER",
    "GLYPH_HEIGHT",
    "GLYPH_WIDTHS",
    "Geometry",
    "Glyph",
    "GlyphTable",
    "GridComposer",
    "GridSpec",
    "LabelOverflowError",
    "PanelLayout",
    "PanelPalette",
    "PixelBuffer",
    "STOCK_TABLE",
    "adjust_intersection",
    "build_builtin_font",
    "compute_layout",
    "format_label",
    "get_palette",
    "list_palettes",
    "load_font",
    "load_rgba",
    "overlay",
    "preview_data_url",
    "row_count",
    "save_png",
]
