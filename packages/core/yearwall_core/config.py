"""Persisted last-used wallpaper settings and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from yearwall_renderer import THEME_IDS, WallpaperConfig, get_device, normalize_widget
from yearwall_renderer.models import DEFAULT_THEME_ID, LABEL_MAX_CHARS

STATE_VERSION = 2


@dataclass
class SavedWallpaper:
    theme: str = DEFAULT_THEME_ID
    widget: str = "ring"
    label: str = ""
    timezone: str = "UTC"
    custom_color: str | None = None


@dataclass
class SavedDevice:
    name: str | None = None


@dataclass
class AppState:
    state_version: int = STATE_VERSION
    wallpaper: SavedWallpaper = field(default_factory=SavedWallpaper)
    device: SavedDevice = field(default_factory=SavedDevice)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "YearWall"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "YearWall"
    return Path.home() / ".config" / "yearwall"


def config_path() -> Path:
    return config_root() / "state.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_wallpaper(state: AppState) -> None:
    wp = state.wallpaper
    if wp.theme not in THEME_IDS:
        wp.theme = DEFAULT_THEME_ID
    wp.widget = normalize_widget(wp.widget if isinstance(wp.widget, str) else None)
    wp.label = wp.label[:LABEL_MAX_CHARS] if isinstance(wp.label, str) else ""
    if not isinstance(wp.timezone, str) or not wp.timezone:
        wp.timezone = "UTC"
    if not isinstance(wp.custom_color, str) or not wp.custom_color:
        wp.custom_color = None


def _normalize_device(state: AppState) -> None:
    if get_device(state.device.name if isinstance(state.device.name, str) else None) is None:
        state.device.name = None


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("state_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 stored the browser client's layout: {"config": {...camelCase...}, "device": "<name>"}.
        legacy = dict(data.get("config", {}) or {})
        data["wallpaper"] = {
            "theme": legacy.get("theme"),
            "widget": legacy.get("widget"),
            "label": legacy.get("name", ""),
            "timezone": legacy.get("timezone"),
            "custom_color": legacy.get("customColor"),
        }
        device = data.get("device")
        data["device"] = {"name": device} if isinstance(device, str) else {}
        data["state_version"] = 2

    return data


def load_state(path: Path | None = None) -> AppState:
    path = path or config_path()
    if not path.exists():
        return AppState()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        data = _migrate(raw)
    except (OSError, ValueError, TypeError, AttributeError):
        return AppState()

    state = AppState(
        state_version=STATE_VERSION,
        wallpaper=_merge(SavedWallpaper, data.get("wallpaper", {})),
        device=_merge(SavedDevice, data.get("device", {})),
    )

    _normalize_wallpaper(state)
    _normalize_device(state)
    return state


def save_state(state: AppState, path: Path | None = None) -> Path:
    state.state_version = STATE_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(state), indent=2, sort_keys=True), encoding="utf-8")
    return path


def to_wallpaper_config(state: AppState) -> WallpaperConfig:
    wp = state.wallpaper
    return WallpaperConfig(
        theme=wp.theme,
        widget=wp.widget,
        label=wp.label,
        timezone=wp.timezone,
        custom_color=wp.custom_color,
    )


def remember(state: AppState, config: WallpaperConfig, device_name: str | None = None) -> None:
    state.wallpaper = SavedWallpaper(
        theme=config.theme,
        widget=config.widget,
        label=config.label[:LABEL_MAX_CHARS],
        timezone=config.timezone,
        custom_color=config.custom_color,
    )
    state.device = SavedDevice(name=device_name)
