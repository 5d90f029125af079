"""Pillow offscreen DisplayBackend.

Renders into an RGBA ``PIL.Image`` without any windowing system. Used by
the headless CLI mode to replay strokes and export a PNG, and by tests
that should not depend on SDL.

Public API:
    * size()
    * begin_frame() -> Canvas
    * end_frame()
    * save_png(path)
    * image (the current frame)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw

from glyphboard.core.geometry import PointLike
from glyphboard.core.spline import cubic_steps, flatten_cubic
from glyphboard.render.canvas import Canvas, DisplayBackend
from glyphboard.render.style import Color, LineCap, StrokeStyle


def _xy(p: PointLike) -> Tuple[float, float]:
    return float(p[0]), float(p[1])


class _PillowCanvas(Canvas):
    """Pillow-backed canvas drawing into an RGBA image."""

    def __init__(self, img: Image.Image) -> None:
        self._img = img
        self._draw = ImageDraw.Draw(img)

    def clear(self, color: Color) -> None:
        w, h = self._img.size
        self._draw.rectangle((0, 0, w, h), fill=tuple(color))

    def dot(self, center: PointLike, style: StrokeStyle) -> None:
        x, y = _xy(center)
        r = max(0.5, style.width / 2.0)
        bbox = [x - r, y - r, x + r, y + r]
        if style.cap is LineCap.ROUND:
            self._draw.ellipse(bbox, fill=tuple(style.color))
        elif style.cap is LineCap.SQUARE:
            self._draw.rectangle(bbox, fill=tuple(style.color))

    def line(self, p0: PointLike, p1: PointLike, style: StrokeStyle) -> None:
        self._stroke([_xy(p0), _xy(p1)], style)

    def cubic(
        self,
        p0: PointLike,
        h1: PointLike,
        h2: PointLike,
        p1: PointLike,
        style: StrokeStyle,
    ) -> None:
        pts = flatten_cubic(p0, h1, h2, p1, steps=cubic_steps(p0, h1, h2, p1))
        self._stroke([_xy(p) for p in pts], style)

    def _stroke(self, pts: Sequence[Tuple[float, float]], style: StrokeStyle) -> None:
        deduped: List[Tuple[float, float]] = []
        for p in pts:
            if not deduped or deduped[-1] != p:
                deduped.append(p)
        if len(deduped) == 1:
            self.dot(deduped[0], style)
            return
        width = max(1, int(round(style.width)))
        joint = "curve" if style.cap is LineCap.ROUND else None
        self._draw.line(deduped, fill=tuple(style.color), width=width, joint=joint)
        if style.cap is LineCap.ROUND and width > 2:
            # ImageDraw only rounds interior joints; cap the two ends.
            for end in (deduped[0], deduped[-1]):
                self.dot(end, style)


class PillowDisplayBackend(DisplayBackend):
    def __init__(
        self,
        size: Tuple[int, int] = (640, 480),
        background: Color = (255, 255, 255, 255),
    ) -> None:
        self._w = int(size[0])
        self._h = int(size[1])
        self._frame = Image.new("RGBA", (self._w, self._h), tuple(background))
        self._canvas: _PillowCanvas | None = None
        self.frames = 0

    @property
    def image(self) -> Image.Image:
        return self._frame

    def size(self) -> Tuple[int, int]:
        return (self._w, self._h)

    def begin_frame(self) -> Canvas:
        self._canvas = _PillowCanvas(self._frame)
        return self._canvas

    def end_frame(self) -> None:
        self._canvas = None
        self.frames += 1

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._frame.getpixel((int(x), int(y)))
        return (int(r), int(g), int(b), int(a))

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._frame.save(path, format="PNG")
