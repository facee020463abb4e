"""Full-frame wallpaper composition.

Layout, top to bottom: a spacer, the header label, the selected widget
centred in the remaining space, the two-column stats footer and the
"generated at" timestamp line.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from yearwall_progress import ProgressFacts, compute_progress

from .devices import DEFAULT_STYLE
from .models import (
    DeviceProfile,
    Label,
    RenderedFrame,
    RenderedWidget,
    Shape,
    StyleParams,
    WallpaperConfig,
    normalize_widget,
    translate,
)
from .themes import effective_accent, get_theme
from .widgets import WIDGET_RENDERERS

_LOG = logging.getLogger("yearwall.renderer")

DEFAULT_WIDTH = 1080
DEFAULT_HEIGHT = 1920

PADDING_TOP = 160
PADDING_BOTTOM = 80
SPACER_RATIO = 0.25
HEADER_MIN_HEIGHT = 100
HEADER_LINE_HEIGHT = 1.1
LINE_HEIGHT = 1.2
WIDGET_PADDING = 20
STAT_COLUMN_GAP = 50
STAT_CAPTION_GAP = 8
STATS_MARGIN_BOTTOM = 90
CAPTION_OPACITY = 0.6
TIMESTAMP_SIZE = 32
TIMESTAMP_OPACITY = 0.9


def _stats_labels(
    progress: ProgressFacts, style: StyleParams, width: float, top: float, foreground: str, accent: str
) -> list[Label]:
    offset = STAT_COLUMN_GAP / 2 + style.stat_size * 2
    value_y = top + style.sub_header_size * LINE_HEIGHT + STAT_CAPTION_GAP
    columns = (
        (width / 2 - offset, "Passed", f"{progress.percentage_complete}%"),
        (width / 2 + offset, "Remaining", str(progress.days_remaining)),
    )
    labels: list[Label] = []
    for x, caption, value in columns:
        labels.append(
            Label(x=x, y=top, text=caption, size=style.sub_header_size, color=foreground, opacity=CAPTION_OPACITY)
        )
        labels.append(Label(x=x, y=value_y, text=value, size=style.stat_size, color=accent, bold=True))
    return labels


def _place_widget(widget: RenderedWidget, width: float, area_top: float, area_bottom: float) -> tuple[float, float]:
    x = (width - widget.width) / 2
    y = area_top + (area_bottom - area_top - widget.height) / 2
    # Oversized widgets hang from the top of the area instead of covering the header.
    return x, max(area_top, y)


def compose(
    config: WallpaperConfig,
    device: DeviceProfile | None = None,
    *,
    width: int | None = None,
    height: int | None = None,
    now: datetime | None = None,
) -> RenderedFrame:
    """Build the full-frame shape tree for ``config``.

    ``now`` is sampled once here when omitted; everything downstream uses
    the same instant. Raises ``InvalidTimezone`` for an unknown zone.
    """
    palette = get_theme(config.theme)
    if palette.name != config.theme:
        _LOG.debug("unknown theme %r, using %s", config.theme, palette.name, extra={"event": "theme_fallback"})

    style = device.style if device is not None else DEFAULT_STYLE
    accent = effective_accent(palette, config.custom_color)
    # Non-positive sizes count as "not given".
    if not width or width <= 0:
        width = device.width if device is not None else DEFAULT_WIDTH
    if not height or height <= 0:
        height = device.height if device is not None else DEFAULT_HEIGHT
    frame_width, frame_height = width, height

    now = now or datetime.now(timezone.utc)
    progress = compute_progress(now, config.timezone)

    kind = normalize_widget(config.widget)
    if kind != config.widget:
        _LOG.debug("widget %r rendered as %s", config.widget, kind, extra={"event": "widget_fallback"})
    widget = WIDGET_RENDERERS[kind](progress, accent, palette.foreground, style)

    content_height = frame_height - PADDING_TOP - PADDING_BOTTOM
    header_top = PADDING_TOP + content_height * SPACER_RATIO
    header_height = max(HEADER_MIN_HEIGHT, style.header_size * HEADER_LINE_HEIGHT)

    timestamp_top = frame_height - PADDING_BOTTOM - TIMESTAMP_SIZE * LINE_HEIGHT
    stats_height = (style.sub_header_size + style.stat_size) * LINE_HEIGHT + STAT_CAPTION_GAP
    stats_top = timestamp_top - STATS_MARGIN_BOTTOM - stats_height

    area_top = header_top + header_height + WIDGET_PADDING
    area_bottom = stats_top - WIDGET_PADDING
    origin = _place_widget(widget, frame_width, area_top, area_bottom)

    shapes: list[Shape] = []
    if config.label:
        shapes.append(
            Label(
                x=frame_width / 2,
                y=header_top,
                text=config.label,
                size=style.header_size,
                color=palette.foreground,
                bold=True,
            )
        )
    shapes.extend(translate(shape, origin[0], origin[1]) for shape in widget.shapes)
    shapes.extend(_stats_labels(progress, style, frame_width, stats_top, palette.foreground, accent))
    shapes.append(
        Label(
            x=frame_width / 2,
            y=timestamp_top,
            text=f"generated at - {progress.generated_at_label}",
            size=TIMESTAMP_SIZE,
            color=palette.foreground,
            opacity=TIMESTAMP_OPACITY,
        )
    )

    return RenderedFrame(
        width=frame_width,
        height=frame_height,
        background=palette.background,
        foreground=palette.foreground,
        accent=accent,
        progress=progress,
        widget=widget,
        widget_origin=origin,
        shapes=tuple(shapes),
    )
