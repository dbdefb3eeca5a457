"""Built-in panel palettes."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Color

DEFAULT_PALETTE_NAME = "classic"


@dataclass(frozen=True)
class PanelPalette:
    name: str
    border: Color
    fill: Color
    accent: Color


PALETTES: dict[str, PanelPalette] = {
    "classic": PanelPalette(
        name="classic",
        border=Color(0, 0, 0, 255),
        fill=Color(255, 255, 255, 255),
        accent=Color(237, 28, 36, 255),
    ),
    "ink": PanelPalette(
        name="ink",
        border=Color(20, 24, 38, 255),
        fill=Color(244, 247, 255, 255),
        accent=Color(53, 217, 255, 255),
    ),
    "ember": PanelPalette(
        name="ember",
        border=Color(26, 20, 14, 255),
        fill=Color(255, 247, 232, 255),
        accent=Color(255, 179, 71, 255),
    ),
}


def list_palettes() -> list[str]:
    return sorted(PALETTES.keys())


def get_palette(name: str | None) -> PanelPalette:
    if not name:
        return PALETTES[DEFAULT_PALETTE_NAME]
    return PALETTES.get(name, PALETTES[DEFAULT_PALETTE_NAME])
