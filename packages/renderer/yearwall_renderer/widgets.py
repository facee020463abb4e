"""Progress widgets: ring, dot grid and numeric countdown.

Each widget is a plain function with the same signature. None of them
validate style parameters; zero or negative sizes yield an empty or
inverted layout, never an exception.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable

from yearwall_progress import ProgressFacts

from .models import Arc, Circle, Dot, Label, RenderedWidget, StyleParams, normalize_widget

WidgetRenderer = Callable[[ProgressFacts, str, str, StyleParams], RenderedWidget]

RING_SCALE = 0.80
RING_TRACK_OPACITY = 0.1
REMAINING_DOT_OPACITY = 0.15
NUMERIC_CAPTION = "DAYS LEFT"
NUMERIC_CAPTION_GAP = 20
LINE_HEIGHT = 1.2


def render_ring(progress: ProgressFacts, accent: str, muted: str, style: StyleParams) -> RenderedWidget:
    """Full muted track plus an accent arc starting at 12 o'clock, clockwise."""
    size = style.widget_size * RING_SCALE
    stroke = style.ring_stroke
    center = size / 2
    radius = center - stroke
    circumference = 2 * math.pi * radius
    fraction = progress.percentage_value / 100

    shapes = (
        Circle(cx=center, cy=center, radius=radius, stroke=stroke, color=muted, opacity=RING_TRACK_OPACITY),
        Arc(
            cx=center,
            cy=center,
            radius=radius,
            stroke=stroke,
            color=accent,
            start_deg=-90.0,
            sweep_deg=fraction * 360.0,
            length=fraction * circumference,
        ),
        Label(
            x=center,
            y=center - style.widget_text_size / 2,
            text=str(progress.calendar_year),
            size=style.widget_text_size,
            color=muted,
            bold=True,
        ),
    )
    return RenderedWidget(kind="ring", width=size, height=size, shapes=shapes)


def grid_columns(width: float, dot_size: float, gap: float) -> int:
    pitch = dot_size + gap
    if pitch <= 0:
        return 1
    return max(1, int((width + gap) // pitch))


def render_dotgrid(progress: ProgressFacts, accent: str, muted: str, style: StyleParams) -> RenderedWidget:
    """One dot per day of the year, row-major; index ``i`` is passed iff ``i < day_of_year``."""
    size = style.dot_size
    gap = style.dot_gap
    pitch = size + gap
    columns = grid_columns(style.widget_size, size, gap)
    total = progress.total_days_in_year

    dots = []
    for i in range(total):
        row, col = divmod(i, columns)
        passed = i < progress.day_of_year
        dots.append(
            Dot(
                x=col * pitch,
                y=row * pitch,
                diameter=size,
                color=accent if passed else muted,
                opacity=1.0 if passed else REMAINING_DOT_OPACITY,
                passed=passed,
            )
        )

    rows = math.ceil(total / columns)
    height = rows * size + max(rows - 1, 0) * gap
    return RenderedWidget(kind="dotgrid", width=style.widget_size, height=height, shapes=tuple(dots))


def render_numeric(progress: ProgressFacts, accent: str, muted: str, style: StyleParams) -> RenderedWidget:
    width = style.widget_size
    caption_y = style.widget_text_size + NUMERIC_CAPTION_GAP
    shapes = (
        Label(
            x=width / 2,
            y=0,
            text=str(progress.days_remaining),
            size=style.widget_text_size,
            color=accent,
            bold=True,
        ),
        Label(x=width / 2, y=caption_y, text=NUMERIC_CAPTION, size=style.widget_label_size, color=muted),
    )
    height = caption_y + style.widget_label_size * LINE_HEIGHT
    return RenderedWidget(kind="numeric", width=width, height=height, shapes=shapes)


WIDGET_RENDERERS = MappingProxyType(
    {
        "ring": render_ring,
        "dotgrid": render_dotgrid,
        "numeric": render_numeric,
    }
)


def get_widget_renderer(kind: str | None) -> WidgetRenderer:
    return WIDGET_RENDERERS[normalize_widget(kind)]
