"""Renderer package for YearWall wallpaper composition."""

from .devices import DEFAULT_STYLE, DEVICES, find_device, get_device, list_devices, resolve_style
from .models import (
    THEME_IDS,
    WIDGET_KINDS,
    DeviceProfile,
    RenderedFrame,
    RenderedWidget,
    StyleParams,
    ThemePalette,
    WallpaperConfig,
    normalize_widget,
)
from .raster import WallpaperRasterizer
from .themes import THEMES, effective_accent, get_theme, list_themes
from .wallpaper import compose
from .widgets import WIDGET_RENDERERS, get_widget_renderer

__all__ = [
    "DEFAULT_STYLE",
    "DEVICES",
    "THEMES",
    "THEME_IDS",
    "WIDGET_KINDS",
    "WIDGET_RENDERERS",
    "WallpaperRasterizer",
    "DeviceProfile",
    "RenderedFrame",
    "RenderedWidget",
    "StyleParams",
    "ThemePalette",
    "WallpaperConfig",
    "compose",
    "effective_accent",
    "find_device",
    "get_device",
    "get_theme",
    "get_widget_renderer",
    "list_devices",
    "list_themes",
    "normalize_widget",
    "resolve_style",
]
