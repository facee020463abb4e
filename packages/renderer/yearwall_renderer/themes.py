"""Built-in wallpaper themes."""

from __future__ import annotations

from types import MappingProxyType

from .models import DEFAULT_THEME_ID, ThemePalette

THEMES = MappingProxyType(
    {
        "dark": ThemePalette(name="dark", background="#000000", foreground="#ffffff", accent="#3b82f6"),
        "light": ThemePalette(name="light", background="#ffffff", foreground="#000000", accent="#ef4444"),
        "midnight": ThemePalette(name="midnight", background="#1e1b4b", foreground="#e2e8f0", accent="#818cf8"),
        "sunset": ThemePalette(name="sunset", background="#4c0519", foreground="#ffe4e6", accent="#fb7185"),
    }
)


def list_themes() -> list[str]:
    return list(THEMES.keys())


def get_theme(name: str | None) -> ThemePalette:
    if not name:
        return THEMES[DEFAULT_THEME_ID]
    return THEMES.get(name, THEMES[DEFAULT_THEME_ID])


def effective_accent(palette: ThemePalette, custom_color: str | None = None) -> str:
    return custom_color or palette.accent
