"""CLI entrypoints for rendering YearWall wallpapers and inspecting catalogs."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from yearwall_core import (
    build_query,
    load_state,
    parse_query,
    remember,
    resolve_timezone,
    save_state,
    share_url,
    to_wallpaper_config,
)
from yearwall_core.logging_setup import configure_logging, get_logger, install_excepthook
from yearwall_core.share import RenderRequest, normalize_color
from yearwall_progress import InvalidTimezone, compute_progress
from yearwall_renderer import (
    THEME_IDS,
    THEMES,
    WIDGET_KINDS,
    DeviceProfile,
    WallpaperConfig,
    WallpaperRasterizer,
    compose,
    find_device,
    get_device,
    list_devices,
    normalize_widget,
)
from yearwall_renderer.wallpaper import DEFAULT_HEIGHT, DEFAULT_WIDTH

# Stands in for the network-inferred client timezone header of the HTTP endpoint.
CLIENT_TZ_ENV = "YEARWALL_CLIENT_TZ"
DEFAULT_BASE_URL = "https://yearwall.app/api/og"


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def instant(value: str) -> datetime:
    """argparse type for ISO-8601 instants; naive values are UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def _resolve_device(args: argparse.Namespace, saved_name: str | None) -> DeviceProfile | None:
    if args.device:
        device = get_device(args.device)
        if device is None:
            get_logger("cli").warning("unknown device %r, using default style", args.device)
        return device
    if args.width or args.height:
        return find_device(args.width or DEFAULT_WIDTH, args.height or DEFAULT_HEIGHT)
    return get_device(saved_name)


def _request_from_args(args: argparse.Namespace) -> tuple[RenderRequest, DeviceProfile | None]:
    header_tz = os.environ.get(CLIENT_TZ_ENV)
    if args.query:
        request = parse_query(args.query, header_timezone=header_tz)
        return request, find_device(request.width, request.height)

    state = load_state()
    saved = to_wallpaper_config(state)
    theme = args.theme or saved.theme
    config = WallpaperConfig(
        theme=theme if theme in THEME_IDS else "dark",
        widget=normalize_widget(args.widget or saved.widget),
        label=saved.label if args.label is None else args.label,
        timezone=resolve_timezone(args.tz, header_tz, saved.timezone),
        custom_color=normalize_color(saved.custom_color if args.color is None else args.color),
    )
    device = _resolve_device(args, state.device.name)
    width = args.width or (device.width if device else DEFAULT_WIDTH)
    height = args.height or (device.height if device else DEFAULT_HEIGHT)
    return RenderRequest(config=config, width=width, height=height), device


def cmd_render(args: argparse.Namespace) -> int:
    log = get_logger("cli")
    request, device = _request_from_args(args)
    now = args.at or datetime.now(timezone.utc)
    frame = compose(request.config, device, width=request.width, height=request.height, now=now)

    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(WallpaperRasterizer().render_png(frame))
    log.info(
        "rendered %s",
        out,
        extra={
            "event": "wallpaper_rendered",
            "output": str(out),
            "theme": request.config.theme,
            "widget": request.config.widget,
            "timezone": request.config.timezone,
            "width": frame.width,
            "height": frame.height,
            "device": device.name if device else None,
        },
    )

    if args.save:
        state = load_state()
        remember(state, request.config, device.name if device else None)
        save_state(state)

    _print_json(
        {
            "output": str(out),
            "width": frame.width,
            "height": frame.height,
            "device": device.name if device else None,
            "config": asdict(request.config),
            "progress": asdict(frame.progress),
        }
    )
    return 0


def cmd_progress(args: argparse.Namespace) -> int:
    try:
        facts = compute_progress(args.at or datetime.now(timezone.utc), args.tz)
    except InvalidTimezone as exc:
        _print_json({"success": False, "error": str(exc)})
        return 2
    _print_json(asdict(facts))
    return 0


def cmd_devices(_args: argparse.Namespace) -> int:
    _print_json(
        [
            {"name": d.name, "width": d.width, "height": d.height, "style": asdict(d.style)}
            for d in list_devices()
        ]
    )
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json({name: asdict(palette) for name, palette in THEMES.items()})
    return 0


def cmd_share_url(args: argparse.Namespace) -> int:
    request, _device = _request_from_args(args)
    if args.query_only:
        print(build_query(request.config, request.width, request.height))
    else:
        print(share_url(args.base_url, request.config, request.width, request.height))
    return 0


def _add_config_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--query", default=None, help="Query string or URL with theme/widget/name/tz/color/width/height")
    cmd.add_argument("--theme", choices=list(THEME_IDS), default=None)
    cmd.add_argument("--widget", default=None, help=f"One of {', '.join(WIDGET_KINDS)}")
    cmd.add_argument("--label", default=None, help="Header text")
    cmd.add_argument("--tz", default=None, help="IANA timezone, e.g. Asia/Kolkata")
    cmd.add_argument("--color", default=None, help="Accent color override, e.g. #ff00ff")
    cmd.add_argument("--device", default=None, help="Device name from `yearwall devices`")
    cmd.add_argument("--width", type=int, default=None)
    cmd.add_argument("--height", type=int, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yearwall", description="Year-progress wallpaper renderer")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a wallpaper PNG")
    _add_config_args(render_cmd)
    render_cmd.add_argument("--out", default="wallpaper.png", help="Output PNG path")
    render_cmd.add_argument("--at", type=instant, default=None, help="ISO-8601 instant to render instead of now")
    render_cmd.add_argument("--save", action="store_true", help="Remember this configuration and device")
    render_cmd.set_defaults(func=cmd_render)

    progress_cmd = sub.add_parser("progress", help="Print year-progress facts")
    progress_cmd.add_argument("--tz", default="UTC")
    progress_cmd.add_argument("--at", type=instant, default=None, help="ISO-8601 instant instead of now")
    progress_cmd.set_defaults(func=cmd_progress)

    devices_cmd = sub.add_parser("devices", help="List known devices and their style parameters")
    devices_cmd.set_defaults(func=cmd_devices)

    themes_cmd = sub.add_parser("themes", help="List themes")
    themes_cmd.set_defaults(func=cmd_themes)

    share_cmd = sub.add_parser("share-url", help="Build a shareable wallpaper link")
    _add_config_args(share_cmd)
    share_cmd.add_argument("--base-url", default=DEFAULT_BASE_URL)
    share_cmd.add_argument("--query-only", action="store_true", help="Print only the query string")
    share_cmd.set_defaults(func=cmd_share_url)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    install_excepthook()
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
