"""Framework-agnostic Canvas and DisplayBackend protocols.

Defines the curve primitives the board emits and a display backend
contract so different frameworks (pygame, pillow) can be plugged in.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from glyphboard.core.geometry import PointLike
from glyphboard.render.style import Color, StrokeStyle


class Canvas(Protocol):
    def clear(self, color: Color) -> None:
        ...

    def dot(self, center: PointLike, style: StrokeStyle) -> None:
        ...

    def line(self, p0: PointLike, p1: PointLike, style: StrokeStyle) -> None:
        ...

    def cubic(
        self,
        p0: PointLike,
        h1: PointLike,
        h2: PointLike,
        p1: PointLike,
        style: StrokeStyle,
    ) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def begin_frame(self) -> Canvas:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...
