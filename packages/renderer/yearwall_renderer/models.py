"""Typed renderer models.

Widgets and the composer only build these immutable trees; pixels are
produced later by :mod:`yearwall_renderer.raster`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from yearwall_progress import ProgressFacts

THEME_IDS = ("dark", "light", "midnight", "sunset")
WIDGET_KINDS = ("ring", "dotgrid", "numeric")
WIDGET_ALIASES = {"donut": "ring", "dots": "dotgrid", "text": "numeric"}

DEFAULT_THEME_ID = "dark"
DEFAULT_WIDGET_KIND = "ring"
LABEL_MAX_CHARS = 50


@dataclass(frozen=True)
class ThemePalette:
    name: str
    background: str
    foreground: str
    accent: str


@dataclass(frozen=True)
class StyleParams:
    header_size: float
    sub_header_size: float
    stat_size: float
    widget_size: float
    widget_text_size: float
    widget_label_size: float
    ring_stroke: float
    dot_size: float
    dot_gap: float


@dataclass(frozen=True)
class DeviceProfile:
    name: str
    width: int
    height: int
    style: StyleParams


@dataclass(frozen=True)
class WallpaperConfig:
    theme: str = DEFAULT_THEME_ID
    widget: str = DEFAULT_WIDGET_KIND
    label: str = ""
    timezone: str = "UTC"
    custom_color: str | None = None

    def __post_init__(self) -> None:
        # Absent and empty colors share one representation.
        if not self.custom_color:
            object.__setattr__(self, "custom_color", None)


def normalize_widget(kind: str | None) -> str:
    if not kind:
        return DEFAULT_WIDGET_KIND
    kind = WIDGET_ALIASES.get(kind, kind)
    return kind if kind in WIDGET_KINDS else DEFAULT_WIDGET_KIND


# Shapes: coordinates are pixels, (x, y) is the top-left of the bounding box
# unless noted otherwise.


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    stroke: float
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class Arc:
    """Stroked arc; angles in degrees, 0 at 3 o'clock, growing clockwise."""

    cx: float
    cy: float
    radius: float
    stroke: float
    color: str
    start_deg: float
    sweep_deg: float
    length: float
    round_caps: bool = True
    opacity: float = 1.0


@dataclass(frozen=True)
class Dot:
    x: float
    y: float
    diameter: float
    color: str
    opacity: float
    passed: bool


@dataclass(frozen=True)
class Label:
    """Text anchored at its top-centre point ``(x, y)``."""

    x: float
    y: float
    text: str
    size: float
    color: str
    opacity: float = 1.0
    bold: bool = False


Shape = Union[Circle, Arc, Dot, Label]


def translate(shape: Shape, dx: float, dy: float) -> Shape:
    if isinstance(shape, (Circle, Arc)):
        return replace(shape, cx=shape.cx + dx, cy=shape.cy + dy)
    return replace(shape, x=shape.x + dx, y=shape.y + dy)


@dataclass(frozen=True)
class RenderedWidget:
    kind: str
    width: float
    height: float
    shapes: tuple[Shape, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RenderedFrame:
    width: int
    height: int
    background: str
    foreground: str
    accent: str
    progress: ProgressFacts
    widget: RenderedWidget
    widget_origin: tuple[float, float]
    shapes: tuple[Shape, ...] = field(default_factory=tuple)
