"""Pygame-based DisplayBackend with headless (offscreen) support.

This module implements the curve Canvas and a DisplayBackend using pygame.
It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

pygame has no cubic primitive, so cubics are flattened into polylines that
start and end exactly on the glyph points. Round caps are drawn as filled
discs at every polyline vertex, which also rounds the joins.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from glyphboard.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(640, 480))
    canvas = backend.begin_frame()
    canvas.clear((255, 255, 255, 255))
    board.draw(canvas, StrokeStyle())
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from glyphboard.core.geometry import PointLike
from glyphboard.core.spline import cubic_steps, flatten_cubic
from glyphboard.render.canvas import Canvas, DisplayBackend
from glyphboard.render.style import Color, LineCap, StrokeStyle

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


def _px(p: PointLike) -> Tuple[int, int]:
    return int(round(p[0])), int(round(p[1]))


class _PygameCanvas(Canvas):
    def __init__(self, surface: Any) -> None:
        self._surface = surface

    def clear(self, color: Color) -> None:
        self._surface.fill(_pygame_color(color))

    def dot(self, center: PointLike, style: StrokeStyle) -> None:
        color = _pygame_color(style.color)
        half = max(1, int(round(style.width / 2.0)))
        cx, cy = _px(center)
        if style.cap is LineCap.ROUND:
            pg.draw.circle(self._surface, color, (cx, cy), half, 0)
        elif style.cap is LineCap.SQUARE:
            pg.draw.rect(
                self._surface, color, pg.Rect(cx - half, cy - half, 2 * half, 2 * half)
            )
        # A zero-length butt-capped stroke covers no pixels.

    def line(self, p0: PointLike, p1: PointLike, style: StrokeStyle) -> None:
        self._stroke([_px(p0), _px(p1)], style)

    def cubic(
        self,
        p0: PointLike,
        h1: PointLike,
        h2: PointLike,
        p1: PointLike,
        style: StrokeStyle,
    ) -> None:
        pts = flatten_cubic(p0, h1, h2, p1, steps=cubic_steps(p0, h1, h2, p1))
        self._stroke([_px(p) for p in pts], style)

    def _stroke(self, pts: Sequence[Tuple[int, int]], style: StrokeStyle) -> None:
        color = _pygame_color(style.color)
        width = max(1, int(round(style.width)))
        deduped: List[Tuple[int, int]] = []
        for p in pts:
            if not deduped or deduped[-1] != p:
                deduped.append(p)
        if len(deduped) == 1:
            self.dot(deduped[0], style)
            return
        pg.draw.lines(self._surface, color, False, deduped, width)
        if style.cap is LineCap.ROUND and width > 2:
            radius = width // 2
            for p in deduped:
                pg.draw.circle(self._surface, color, p, radius, 0)


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface.

    Automatically initializes pygame with an offscreen display if the
    environment variable SDL_VIDEODRIVER is set to "dummy". Otherwise, a
    regular window may be created depending on the platform.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (640, 480),
        *,
        create_window: bool = False,
        title: str = "GlyphBoard",
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
                local_pg.display.set_caption(title)
            except local_pg.error as exc:
                logger.warning(
                    "window creation failed (%s); falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions.",
                    exc,
                )
                self._window_surface = None

        # Offscreen surface with per-pixel alpha
        self._surface = local_pg.Surface(
            (self._width, self._height), flags=local_pg.SRCALPHA
        )

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def begin_frame(self) -> Canvas:
        return _PygameCanvas(self._surface)

    def end_frame(self) -> None:
        # If we have a window, blit the offscreen buffer and flip
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()

    def get_pixel(self, x: int, y: int) -> Color:
        c = self._surface.get_at((int(x), int(y)))
        return (int(c.r), int(c.g), int(c.b), int(c.a))

    def save_png(self, path: str) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, path)
