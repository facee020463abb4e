import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "progress"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from yearwall_renderer import WallpaperConfig, WallpaperRasterizer, compose, get_device
from yearwall_renderer.models import Dot, StyleParams

NOW = datetime(2024, 3, 1, tzinfo=timezone.utc)


class RasterTests(unittest.TestCase):
    def setUp(self):
        self.rasterizer = WallpaperRasterizer()

    def test_exact_size_and_background(self):
        frame = compose(WallpaperConfig(theme="sunset"), get_device("iPhone 13 mini"), now=NOW)
        image = self.rasterizer.render_image(frame)
        self.assertEqual(image.size, (1080, 2340))
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(image.getpixel((0, 0)), (0x4C, 0x05, 0x19))

    def test_png_bytes(self):
        frame = compose(WallpaperConfig(widget="numeric"), now=NOW)
        data = self.rasterizer.render_png(frame)
        self.assertTrue(data.startswith(b"\x89PNG\r\n\x1a\n"))
        self.assertTrue(self.rasterizer.preview_data_url(frame).startswith("data:image/png;base64,"))

    def test_dot_colors(self):
        frame = compose(WallpaperConfig(widget="dotgrid", custom_color="#ff00ff"), now=NOW)
        image = self.rasterizer.render_image(frame)
        dots = [s for s in frame.shapes if isinstance(s, Dot)]

        def centre(dot):
            return (int(dot.x + dot.diameter / 2), int(dot.y + dot.diameter / 2))

        self.assertEqual(image.getpixel(centre(dots[0])), (255, 0, 255))
        self.assertEqual(image.getpixel(centre(dots[60])), (255, 0, 255))
        # White at 15% over black.
        r, g, b = image.getpixel(centre(dots[61]))
        for channel in (r, g, b):
            self.assertAlmostEqual(channel, 38, delta=2)

    def test_degenerate_style_renders(self):
        device = get_device("iPhone 13 mini")
        broken = type(device)(name="broken", width=400, height=800, style=StyleParams(*([0] * 9)))
        for widget in ("ring", "dotgrid", "numeric"):
            frame = compose(WallpaperConfig(widget=widget), broken, now=NOW)
            self.assertEqual(self.rasterizer.render_image(frame).size, (400, 800))


if __name__ == "__main__":
    unittest.main()
