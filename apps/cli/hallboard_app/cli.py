"""CLI entrypoints for rendering the hall of shame panel and inspecting its layout."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from hallboard_core import (
    EntriesError,
    PostProcessError,
    load_config,
    load_entries,
    render_onto,
    render_panel,
    resolve_font,
    run_post_command,
)
from hallboard_core.config import AppConfig
from hallboard_core.logging_setup import configure_logging
from hallboard_renderer import (
    STOCK_TABLE,
    GridSpec,
    compute_layout,
    list_palettes,
    load_rgba,
    preview_data_url,
    save_png,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _config(args: argparse.Namespace) -> AppConfig:
    cfg = getattr(args, "app_config", None)
    if cfg is None:
        cfg = load_config(Path(args.config).expanduser() if args.config else None)
    if getattr(args, "palette", None):
        cfg.palette.name = args.palette
    return cfg


def _font_override(args: argparse.Namespace) -> Path | None:
    return Path(args.font).expanduser() if getattr(args, "font", None) else None


def cmd_panel(args: argparse.Namespace) -> int:
    cfg = _config(args)
    entries = load_entries(Path(args.entries))
    panel = render_panel(cfg, entries, resolve_font(cfg, _font_override(args)))

    out = save_png(panel, Path(args.out))
    payload: dict[str, object] = {"output": str(out), "width": panel.width, "height": panel.height}
    if args.data_url:
        payload["data_url"] = preview_data_url(panel)
    _print_json(payload)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _config(args)
    entries = load_entries(Path(args.entries))
    panel = render_panel(cfg, entries, resolve_font(cfg, _font_override(args)))
    if args.panel_out:
        save_png(panel, Path(args.panel_out))

    x = cfg.overlay.x if args.x is None else args.x
    y = cfg.overlay.y if args.y is None else args.y
    base = load_rgba(Path(args.base))
    render_onto(base, panel, x, y)

    out = save_png(base, Path(args.out or args.base))
    if args.post_command:
        run_post_command(args.post_command, cwd=Path(args.post_cwd) if args.post_cwd else None)

    _print_json({"output": str(out), "panel": {"width": panel.width, "height": panel.height}, "offset": [x, y]})
    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    cfg = _config(args)
    spec = GridSpec(
        entry_count=args.count,
        entries_per_row=cfg.panel.entries_per_row,
        entry_width=cfg.panel.entry_width,
        entry_height=cfg.panel.entry_height,
        width=cfg.panel.width,
    )
    _print_json(asdict(compute_layout(spec)))
    return 0


def cmd_glyphs(_args: argparse.Namespace) -> int:
    _print_json(
        {
            "order": STOCK_TABLE.order,
            "gap": STOCK_TABLE.gap,
            "span": STOCK_TABLE.span,
            "glyphs": [asdict(glyph) for glyph in STOCK_TABLE.values()],
        }
    )
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    _print_json(asdict(_config(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hallboard", description="Hall of shame panel renderer")
    parser.add_argument("--config", default=None, help="Path to config JSON (defaults to the user config dir)")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to the console")
    parser.add_argument("--log-dir", default=None, help="Directory for the JSON log file (defaults to the user config dir)")
    sub = parser.add_subparsers(dest="command", required=True)

    panel_cmd = sub.add_parser("panel", help="Render the panel to a PNG")
    panel_cmd.add_argument("--entries", required=True, help="Path to entries JSON array")
    panel_cmd.add_argument("--out", default="hall_of_shame.png")
    panel_cmd.add_argument("--font", default=None, help="Optional font strip PNG")
    panel_cmd.add_argument("--palette", choices=list_palettes(), default=None)
    panel_cmd.add_argument("--data-url", action="store_true", help="Include a base64 PNG data URL in the output")
    panel_cmd.set_defaults(func=cmd_panel)

    render_cmd = sub.add_parser("render", help="Render the panel and overlay it onto a base image")
    render_cmd.add_argument("--entries", required=True, help="Path to entries JSON array")
    render_cmd.add_argument("--base", required=True, help="Base PNG to draw onto")
    render_cmd.add_argument("--out", default=None, help="Output PNG (defaults to overwriting --base)")
    render_cmd.add_argument("--panel-out", default=None, help="Also save the bare panel here")
    render_cmd.add_argument("--font", default=None, help="Optional font strip PNG")
    render_cmd.add_argument("--palette", choices=list_palettes(), default=None)
    render_cmd.add_argument("-x", type=int, default=None, help="Overlay x offset")
    render_cmd.add_argument("-y", type=int, default=None, help="Overlay y offset")
    render_cmd.add_argument("--post-command", default=None, help="Command to run after saving")
    render_cmd.add_argument("--post-cwd", default=None, help="Working directory for --post-command")
    render_cmd.set_defaults(func=cmd_render)

    layout_cmd = sub.add_parser("layout", help="Print grid geometry for an entry count")
    layout_cmd.add_argument("--count", type=int, required=True)
    layout_cmd.set_defaults(func=cmd_layout)

    glyphs_cmd = sub.add_parser("glyphs", help="Print the glyph table")
    glyphs_cmd.set_defaults(func=cmd_glyphs)

    config_cmd = sub.add_parser("config", help="Print effective configuration")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def _log_dir(args: argparse.Namespace, cfg: AppConfig) -> Path | None:
    raw = args.log_dir or cfg.output.log_dir
    return Path(raw).expanduser() if raw else None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.app_config = load_config(Path(args.config).expanduser() if args.config else None)
    logger = configure_logging(
        keep_files=args.app_config.output.keep_log_files,
        console=args.verbose,
        level=logging.DEBUG if args.verbose else logging.INFO,
        directory=_log_dir(args, args.app_config),
    )
    try:
        return int(args.func(args))
    except (EntriesError, PostProcessError, ValueError, IndexError, OSError) as exc:
        logger.error(f"{args.command} failed: {exc}", exc_info=True, extra={"event": "command_failed"})
        print(f"error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
