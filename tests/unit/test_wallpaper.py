import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "progress"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from yearwall_progress import InvalidTimezone
from yearwall_renderer import DEFAULT_STYLE, WallpaperConfig, compose, get_device
from yearwall_renderer.models import Dot, Label
from yearwall_renderer import wallpaper

NOW = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _texts(frame):
    return [s.text for s in frame.shapes if isinstance(s, Label)]


def _widget_area(frame):
    # Bottom of the header block and top of the stats footer, each with the 20 px widget padding.
    header_top = wallpaper.PADDING_TOP + (frame.height - wallpaper.PADDING_TOP - wallpaper.PADDING_BOTTOM) * 0.25
    area_top = header_top + max(wallpaper.HEADER_MIN_HEIGHT, DEFAULT_STYLE.header_size * wallpaper.HEADER_LINE_HEIGHT) + 20
    passed = next(s for s in frame.shapes if isinstance(s, Label) and s.text == "Passed")
    return area_top, passed.y - 20


class ComposeTests(unittest.TestCase):
    def test_default_frame_size_without_device(self):
        frame = compose(WallpaperConfig(), now=NOW)
        self.assertEqual((frame.width, frame.height), (1080, 1920))
        self.assertEqual(frame.widget.width, DEFAULT_STYLE.widget_size * 0.80)

    def test_device_dimensions_and_style(self):
        device = get_device("iPhone 16 Pro Max")
        frame = compose(WallpaperConfig(widget="dotgrid"), device, now=NOW)
        self.assertEqual((frame.width, frame.height), (1320, 2868))
        self.assertEqual(frame.widget.width, device.style.widget_size)

    def test_explicit_size_wins(self):
        frame = compose(WallpaperConfig(), get_device("iPhone 13 mini"), width=800, height=1600, now=NOW)
        self.assertEqual((frame.width, frame.height), (800, 1600))

    def test_stats_and_timestamp(self):
        frame = compose(WallpaperConfig(label="Make it count"), now=NOW)
        texts = _texts(frame)
        self.assertEqual(texts[0], "Make it count")
        for expected in ("Passed", "16.7%", "Remaining", "305", "generated at - 00:00 on 01 Mar"):
            self.assertIn(expected, texts)
        self.assertEqual(texts[-1], "generated at - 00:00 on 01 Mar")

    def test_empty_label_has_no_header(self):
        frame = compose(WallpaperConfig(widget="numeric"), now=NOW)
        self.assertEqual(_texts(frame)[0], "305")

    def test_unknown_widget_renders_ring(self):
        fallback = compose(WallpaperConfig(widget="sparkline"), now=NOW)
        ring = compose(WallpaperConfig(widget="ring"), now=NOW)
        self.assertEqual(fallback, ring)
        self.assertEqual(fallback.widget.kind, "ring")

    def test_unknown_theme_renders_dark(self):
        self.assertEqual(
            compose(WallpaperConfig(theme="neon"), now=NOW).shapes,
            compose(WallpaperConfig(theme="dark"), now=NOW).shapes,
        )

    def test_custom_color_is_used_for_accent(self):
        frame = compose(WallpaperConfig(custom_color="#ff00ff"), now=NOW)
        self.assertEqual(frame.accent, "#ff00ff")
        values = [s for s in frame.shapes if isinstance(s, Label) and s.text in ("16.7%", "305")]
        self.assertTrue(values)
        self.assertTrue(all(s.color == "#ff00ff" for s in values))

    def test_empty_custom_color_means_absent(self):
        self.assertIsNone(WallpaperConfig(custom_color="").custom_color)
        self.assertEqual(compose(WallpaperConfig(custom_color=""), now=NOW).accent, "#3b82f6")

    def test_widget_is_centred_horizontally(self):
        frame = compose(WallpaperConfig(widget="dotgrid"), now=NOW)
        x, y = frame.widget_origin
        self.assertAlmostEqual(x * 2 + frame.widget.width, frame.width)
        first = next(s for s in frame.shapes if isinstance(s, Dot))
        self.assertEqual((first.x, first.y), (x, y))

    def test_widget_is_centred_vertically_between_header_and_stats(self):
        frame = compose(WallpaperConfig(widget="ring"), now=NOW)
        _, y = frame.widget_origin
        area_top, area_bottom = _widget_area(frame)
        self.assertGreater(y, area_top)
        self.assertAlmostEqual(y - area_top, area_bottom - (y + frame.widget.height))
        self.assertAlmostEqual(y, 877.8)

    def test_oversized_widget_hangs_from_area_top(self):
        frame = compose(WallpaperConfig(widget="dotgrid"), now=NOW)
        area_top, area_bottom = _widget_area(frame)
        self.assertGreater(frame.widget.height, area_bottom - area_top)
        self.assertAlmostEqual(frame.widget_origin[1], area_top)
        self.assertAlmostEqual(area_top, 700)

    def test_non_positive_size_uses_default(self):
        frame = compose(WallpaperConfig(), width=-5, height=0, now=NOW)
        self.assertEqual((frame.width, frame.height), (1080, 1920))
        device = get_device("iPhone 17")
        frame = compose(WallpaperConfig(), device, width=-1, height=-1, now=NOW)
        self.assertEqual((frame.width, frame.height), (1179, 2556))

    def test_progress_is_sampled_in_config_timezone(self):
        instant = datetime(2023, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        frame = compose(WallpaperConfig(timezone="Pacific/Kiritimati", widget="dotgrid"), now=instant)
        self.assertEqual(frame.progress.calendar_year, 2024)
        self.assertEqual(sum(1 for s in frame.widget.shapes if s.passed), 1)

    def test_unknown_timezone_propagates(self):
        with self.assertRaises(InvalidTimezone):
            compose(WallpaperConfig(timezone="Atlantis/Capital"), now=NOW)

    def test_repeatable(self):
        config = WallpaperConfig(theme="midnight", widget="numeric", label="2024", timezone="Asia/Kolkata")
        self.assertEqual(compose(config, now=NOW), compose(config, now=NOW))


if __name__ == "__main__":
    unittest.main()
