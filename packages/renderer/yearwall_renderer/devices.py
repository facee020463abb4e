"""Device resolution tiers and the iPhone model catalog."""

from __future__ import annotations

from types import MappingProxyType

from .models import DeviceProfile, StyleParams

# Used by the composer when the caller has no device profile at all.
DEFAULT_STYLE = StyleParams(
    header_size=65,
    sub_header_size=28,
    stat_size=42,
    widget_size=680,
    widget_text_size=120,
    widget_label_size=48,
    ring_stroke=40,
    dot_size=25,
    dot_gap=18,
)

STYLE_TIERS = MappingProxyType(
    {
        (1080, 2340): StyleParams(
            header_size=65,
            sub_header_size=30,
            stat_size=46,
            widget_size=750,
            widget_text_size=120,
            widget_label_size=48,
            ring_stroke=40,
            dot_size=30,
            dot_gap=18,
        ),
        (1179, 2556): StyleParams(
            header_size=71,
            sub_header_size=32,
            stat_size=50,
            widget_size=790,
            widget_text_size=130,
            widget_label_size=52,
            ring_stroke=44,
            dot_size=30,
            dot_gap=20,
        ),
        (1206, 2622): StyleParams(
            header_size=72,
            sub_header_size=34,
            stat_size=52,
            widget_size=870,
            widget_text_size=145,
            widget_label_size=57,
            ring_stroke=48,
            dot_size=33,
            dot_gap=22,
        ),
        (1290, 2796): StyleParams(
            header_size=77,
            sub_header_size=36,
            stat_size=54,
            widget_size=870,
            widget_text_size=145,
            widget_label_size=57,
            ring_stroke=48,
            dot_size=33,
            dot_gap=22,
        ),
        (1320, 2868): StyleParams(
            header_size=79,
            sub_header_size=37,
            stat_size=55,
            widget_size=980,
            widget_text_size=155,
            widget_label_size=60,
            ring_stroke=48,
            dot_size=37,
            dot_gap=25,
        ),
    }
)

DEFAULT_TIER = (1080, 2340)


def resolve_style(width: int, height: int) -> StyleParams:
    return STYLE_TIERS.get((width, height), STYLE_TIERS[DEFAULT_TIER])


_MODELS = (
    ("iPhone 17 Pro Max", 1320, 2868),
    ("iPhone 17 Pro", 1206, 2622),
    ("iPhone 17", 1179, 2556),
    ("iPhone 16 Pro Max", 1320, 2868),
    ("iPhone 16 Pro", 1206, 2622),
    ("iPhone 15 Plus / 15 Pro Max / 16 Plus", 1290, 2796),
    ("iPhone 15 / 15 Pro / 16", 1179, 2556),
    ("iPhone 13 Pro Max / 14 Plus / 14 Pro Max", 1290, 2796),
    ("iPhone 13 / 13 Pro / 14 / 14 Pro", 1179, 2556),
    ("iPhone 13 mini", 1080, 2340),
)

DEVICES: tuple[DeviceProfile, ...] = tuple(
    DeviceProfile(name=name, width=width, height=height, style=resolve_style(width, height))
    for name, width, height in _MODELS
)


def list_devices() -> list[DeviceProfile]:
    return list(DEVICES)


def get_device(name: str | None) -> DeviceProfile | None:
    if not name:
        return None
    for device in DEVICES:
        if device.name == name:
            return device
    return None


def find_device(width: int, height: int) -> DeviceProfile | None:
    for device in DEVICES:
        if device.width == width and device.height == height:
            return device
    return None
