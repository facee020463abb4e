"""Pillow rasterizer for composed wallpaper frames."""

from __future__ import annotations

import base64
import math
from io import BytesIO

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .models import Arc, Circle, Dot, Label, RenderedFrame, Shape

_REGULAR_FACES = ("DejaVuSans.ttf", "Arial.ttf", "arial.ttf")
_BOLD_FACES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")


def _rgba(color: str, opacity: float = 1.0) -> tuple[int, int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    alpha = int(round(255 * max(0.0, min(1.0, opacity))))
    return (r, g, b, alpha)


class WallpaperRasterizer:
    """Draws a :class:`RenderedFrame` into an RGB image of the frame's exact size."""

    def __init__(self, font_faces: tuple[str, ...] | None = None) -> None:
        self.font_faces = font_faces
        self._fonts: dict[tuple[int, bool], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def render_image(self, frame: RenderedFrame) -> Image.Image:
        image = Image.new("RGB", (frame.width, frame.height), ImageColor.getrgb(frame.background))
        draw = ImageDraw.Draw(image, "RGBA")
        for shape in frame.shapes:
            self._draw_shape(draw, shape)
        return image

    def render_png(self, frame: RenderedFrame) -> bytes:
        buf = BytesIO()
        self.render_image(frame).save(buf, format="PNG", optimize=True)
        return buf.getvalue()

    def preview_data_url(self, frame: RenderedFrame) -> str:
        b64 = base64.b64encode(self.render_png(frame)).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def _font(self, size: int, bold: bool = False):
        key = (size, bold)
        if key in self._fonts:
            return self._fonts[key]

        faces = self.font_faces or (_BOLD_FACES if bold else _REGULAR_FACES)
        font = None
        for face in faces:
            try:
                font = ImageFont.truetype(face, size)
                break
            except OSError:
                continue
        if font is None:
            font = ImageFont.load_default(size=size)
        self._fonts[key] = font
        return font

    def _draw_shape(self, draw: ImageDraw.ImageDraw, shape: Shape) -> None:
        if isinstance(shape, Dot):
            self._draw_dot(draw, shape)
        elif isinstance(shape, Circle):
            self._draw_circle(draw, shape)
        elif isinstance(shape, Arc):
            self._draw_arc(draw, shape)
        elif isinstance(shape, Label):
            self._draw_label(draw, shape)
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    @staticmethod
    def _ring_bbox(cx: float, cy: float, radius: float, stroke: float) -> tuple[float, float, float, float]:
        # Pillow strokes inward from the box edge; the shape's stroke is centred on the radius.
        outer = radius + stroke / 2
        return (cx - outer, cy - outer, cx + outer, cy + outer)

    def _draw_dot(self, draw: ImageDraw.ImageDraw, dot: Dot) -> None:
        if dot.diameter <= 0:
            return
        draw.ellipse((dot.x, dot.y, dot.x + dot.diameter, dot.y + dot.diameter), fill=_rgba(dot.color, dot.opacity))

    def _draw_circle(self, draw: ImageDraw.ImageDraw, circle: Circle) -> None:
        if circle.radius <= 0 or circle.stroke <= 0:
            return
        draw.ellipse(
            self._ring_bbox(circle.cx, circle.cy, circle.radius, circle.stroke),
            outline=_rgba(circle.color, circle.opacity),
            width=max(1, int(round(circle.stroke))),
        )

    def _draw_arc(self, draw: ImageDraw.ImageDraw, arc: Arc) -> None:
        if arc.radius <= 0 or arc.stroke <= 0 or arc.sweep_deg <= 0:
            return
        fill = _rgba(arc.color, arc.opacity)
        end_deg = arc.start_deg + min(arc.sweep_deg, 360.0)
        draw.arc(
            self._ring_bbox(arc.cx, arc.cy, arc.radius, arc.stroke),
            start=arc.start_deg,
            end=end_deg,
            fill=fill,
            width=max(1, int(round(arc.stroke))),
        )
        if not arc.round_caps:
            return
        half = arc.stroke / 2
        for angle in (arc.start_deg, end_deg):
            rad = math.radians(angle)
            px = arc.cx + arc.radius * math.cos(rad)
            py = arc.cy + arc.radius * math.sin(rad)
            draw.ellipse((px - half, py - half, px + half, py + half), fill=fill)

    def _draw_label(self, draw: ImageDraw.ImageDraw, label: Label) -> None:
        size = int(round(label.size))
        if not label.text or size <= 0:
            return
        font = self._font(size, bold=label.bold)
        left, top, right, _bottom = draw.textbbox((0, 0), label.text, font=font)
        x = label.x - (right - left) / 2 - left
        draw.text((x, label.y), label.text, font=font, fill=_rgba(label.color, label.opacity))
