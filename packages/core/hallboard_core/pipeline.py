"""Render pipeline glue: font resolution, panel composition, overlay, post-processing."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from hallboard_renderer import (
    BitmapFont,
    GridComposer,
    PanelLayout,
    PixelBuffer,
    build_builtin_font,
    get_palette,
    load_font,
    load_rgba,
    overlay,
)

from .config import AppConfig

logger = logging.getLogger("hallboard.pipeline")


class PostProcessError(RuntimeError):
    def __init__(self, command: Sequence[str], returncode: int) -> None:
        super().__init__(f"Process {command[0]!r} exited with code {returncode}")
        self.command = list(command)
        self.returncode = returncode


def resolve_font(cfg: AppConfig, override: Path | None = None) -> BitmapFont:
    path = override or (Path(cfg.font.path).expanduser() if cfg.font.path else None)
    if path is None:
        return build_builtin_font()
    logger.info("loading font raster %s", path, extra={"event": "font_loaded"})
    return load_font(load_rgba(path))


def build_composer(cfg: AppConfig, font: BitmapFont) -> GridComposer:
    layout = PanelLayout(
        entries_per_row=cfg.panel.entries_per_row,
        entry_width=cfg.panel.entry_width,
        entry_height=cfg.panel.entry_height,
        width=cfg.panel.width,
    )
    return GridComposer(font, layout=layout, palette=get_palette(cfg.palette.name))


def render_panel(cfg: AppConfig, entries: Sequence[int | None], font: BitmapFont) -> PixelBuffer:
    panel = build_composer(cfg, font).compose(entries)
    logger.info(
        "rendered panel %dx%d for %d entries",
        panel.width,
        panel.height,
        len(entries),
        extra={"event": "panel_rendered"},
    )
    return panel


def render_onto(base: PixelBuffer, panel: PixelBuffer, x: int, y: int) -> PixelBuffer:
    logger.info("overlaying panel at (%d, %d) on %dx%d base", x, y, base.width, base.height, extra={"event": "overlay"})
    return overlay(base, panel, x, y)


def run_post_command(command: str | Sequence[str], cwd: Path | None = None) -> int:
    argv = shlex.split(command) if isinstance(command, str) else list(command)
    if not argv:
        raise ValueError("post command is empty")
    logger.info("running post command %s", argv, extra={"event": "post_command"})
    returncode = subprocess.call(argv, cwd=str(cwd) if cwd else None)
    if returncode != 0:
        raise PostProcessError(argv, returncode)
    return returncode
