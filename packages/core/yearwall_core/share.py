"""Query-parameter codec for wallpaper requests and shareable links.

This is the boundary where loose input becomes a ``WallpaperConfig``:
unknown themes and widgets are normalized, bad colors and sizes are
dropped, and the timezone fallback chain (explicit ``tz`` parameter,
then the client-timezone header, then ``UTC``) is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
from urllib.parse import parse_qs, urlencode, urlsplit

from PIL import ImageColor

from yearwall_progress import InvalidTimezone, load_zone
from yearwall_renderer import THEME_IDS, WallpaperConfig, normalize_widget
from yearwall_renderer.models import DEFAULT_THEME_ID
from yearwall_renderer.wallpaper import DEFAULT_HEIGHT, DEFAULT_WIDTH

from .logging_setup import get_logger

FALLBACK_TIMEZONE = "UTC"
TIMEZONE_HEADER = "x-vercel-ip-timezone"

_LOG = get_logger("share")


@dataclass(frozen=True)
class RenderRequest:
    config: WallpaperConfig
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT


def resolve_timezone(explicit: str | None = None, header: str | None = None, saved: str | None = None) -> str:
    """Return the first candidate that names a real IANA zone, else ``UTC``.

    Candidates are tried in order: explicit parameter, client-timezone
    header, then the remembered zone.

    Unknown non-empty identifiers are skipped with a warning rather than
    rejected, so a bad link still renders.
    """
    for source, candidate in (("param", explicit), ("header", header), ("saved", saved)):
        if not candidate:
            continue
        try:
            load_zone(candidate)
        except InvalidTimezone:
            _LOG.warning(
                "ignoring unknown timezone %r from %s", candidate, source, extra={"event": "timezone_fallback"}
            )
            continue
        return candidate
    return FALLBACK_TIMEZONE


def normalize_color(value: str | None) -> str | None:
    if not value:
        return None
    try:
        ImageColor.getrgb(value)
    except ValueError:
        _LOG.warning("ignoring invalid color %r", value, extra={"event": "color_dropped"})
        return None
    return value


def _parse_dimension(value: str | None, default: int) -> int:
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        _LOG.warning("invalid dimension %r, using %d", value, default, extra={"event": "dimension_fallback"})
        return default
    return parsed if parsed > 0 else default


def _first(params: Mapping[str, list[str]], key: str) -> str | None:
    values = params.get(key)
    return values[0] if values else None


def parse_query(query: str | Mapping[str, str], header_timezone: str | None = None) -> RenderRequest:
    if isinstance(query, str):
        if "?" in query:
            query = urlsplit(query).query
        params = parse_qs(query, keep_blank_values=True)
    else:
        params = {k: [v] for k, v in query.items()}

    theme = _first(params, "theme") or DEFAULT_THEME_ID
    if theme not in THEME_IDS:
        theme = DEFAULT_THEME_ID

    config = WallpaperConfig(
        theme=theme,
        widget=normalize_widget(_first(params, "widget")),
        label=_first(params, "name") or "",
        timezone=resolve_timezone(_first(params, "tz"), header_timezone),
        custom_color=normalize_color(_first(params, "color")),
    )
    return RenderRequest(
        config=config,
        width=_parse_dimension(_first(params, "width"), DEFAULT_WIDTH),
        height=_parse_dimension(_first(params, "height"), DEFAULT_HEIGHT),
    )


def build_query(config: WallpaperConfig, width: int | None = None, height: int | None = None) -> str:
    params: dict[str, str] = {
        "theme": config.theme,
        "widget": config.widget,
        "name": config.label,
        "tz": config.timezone,
    }
    if config.custom_color:
        params["color"] = config.custom_color
    if width:
        params["width"] = str(width)
    if height:
        params["height"] = str(height)
    return urlencode(params)


def share_url(base_url: str, config: WallpaperConfig, width: int | None = None, height: int | None = None) -> str:
    return f"{base_url.rstrip('?')}?{build_query(config, width, height)}"
