"""Persistent render settings schema and load/save helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from hallboard_renderer import GLYPH_HEIGHT, DEFAULT_PALETTE_NAME, list_palettes

from .logging_setup import config_root


CONFIG_VERSION = 1


@dataclass
class PanelConfig:
    entry_width: int = 32
    entry_height: int = 9
    entries_per_row: int = 4
    width: int = 130


@dataclass
class FontConfig:
    path: str | None = None


@dataclass
class OverlayConfig:
    x: int = 383
    y: int = 0


@dataclass
class PaletteConfig:
    name: str = DEFAULT_PALETTE_NAME


@dataclass
class OutputConfig:
    keep_log_files: int = 7
    log_dir: str | None = None


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    panel: PanelConfig = field(default_factory=PanelConfig)
    font: FontConfig = field(default_factory=FontConfig)
    overlay: OverlayConfig = field(default_factory=OverlayConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _int_or(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _normalize_panel(cfg: AppConfig) -> None:
    panel, defaults = cfg.panel, PanelConfig()
    panel.entry_height = max(GLYPH_HEIGHT + 2, _int_or(panel.entry_height, defaults.entry_height))
    panel.entry_width = max(3, _int_or(panel.entry_width, defaults.entry_width))
    panel.entries_per_row = max(1, _int_or(panel.entries_per_row, defaults.entries_per_row))
    panel.width = max(panel.entries_per_row * panel.entry_width + 2, _int_or(panel.width, defaults.width))


def _normalize_font(cfg: AppConfig) -> None:
    if not isinstance(cfg.font.path, str) or not cfg.font.path:
        cfg.font.path = None


def _normalize_overlay(cfg: AppConfig) -> None:
    defaults = OverlayConfig()
    cfg.overlay.x = max(0, _int_or(cfg.overlay.x, defaults.x))
    cfg.overlay.y = max(0, _int_or(cfg.overlay.y, defaults.y))


def _normalize_palette(cfg: AppConfig) -> None:
    if not isinstance(cfg.palette.name, str) or cfg.palette.name not in list_palettes():
        cfg.palette.name = DEFAULT_PALETTE_NAME


def _normalize_output(cfg: AppConfig) -> None:
    cfg.output.keep_log_files = max(2, _int_or(cfg.output.keep_log_files, OutputConfig().keep_log_files))
    if not isinstance(cfg.output.log_dir, str) or not cfg.output.log_dir:
        cfg.output.log_dir = None


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_int_or(data.get("config_version"), CONFIG_VERSION),
        panel=_merge(PanelConfig, data.get("panel", {})),
        font=_merge(FontConfig, data.get("font", {})),
        overlay=_merge(OverlayConfig, data.get("overlay", {})),
        palette=_merge(PaletteConfig, data.get("palette", {})),
        output=_merge(OutputConfig, data.get("output", {})),
    )

    _normalize_panel(cfg)
    _normalize_font(cfg)
    _normalize_overlay(cfg)
    _normalize_palette(cfg)
    _normalize_output(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
