"""Core services for settings, entry loading, logging, and the render pipeline."""

from .config import AppConfig, load_config, save_config
from .entries import EntriesError, load_entries, parse_entries
from .pipeline import (
    PostProcessError,
    build_composer,
    render_onto,
    render_panel,
    resolve_font,
    run_post_command,
)

__all__ = [
    "AppConfig",
    "EntriesError",
    "PostProcessError",
    "build_composer",
    "load_config",
    "load_entries",
    "parse_entries",
    "render_onto",
    "render_panel",
    "resolve_font",
    "run_post_command",
    "save_config",
]
