"""Core app services for persisted state, logging and shareable links."""

from .config import AppState, load_state, remember, save_state, to_wallpaper_config
from .logging_setup import configure_logging, get_logger
from .share import RenderRequest, build_query, parse_query, resolve_timezone, share_url

__all__ = [
    "AppState",
    "RenderRequest",
    "build_query",
    "configure_logging",
    "get_logger",
    "load_state",
    "parse_query",
    "remember",
    "resolve_timezone",
    "save_state",
    "share_url",
    "to_wallpaper_config",
]
