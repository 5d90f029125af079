from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

from glyphboard.core.geometry import Point, PointLike, as_point
from glyphboard.render.style import Color, StrokeStyle

# Keep pygame headless for every test that touches it
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class RecordingCanvas:
    """Canvas that records every primitive as a ``(kind, *points, style)`` tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def clear(self, color: Color) -> None:
        self.calls.append(("clear", color))

    def dot(self, center: PointLike, style: StrokeStyle) -> None:
        self.calls.append(("dot", as_point(center), style))

    def line(self, p0: PointLike, p1: PointLike, style: StrokeStyle) -> None:
        self.calls.append(("line", as_point(p0), as_point(p1), style))

    def cubic(
        self,
        p0: PointLike,
        h1: PointLike,
        h2: PointLike,
        p1: PointLike,
        style: StrokeStyle,
    ) -> None:
        self.calls.append(
            ("cubic", as_point(p0), as_point(h1), as_point(h2), as_point(p1), style)
        )

    def endpoints(self) -> list[tuple[Point, Point]]:
        """(start, end) of every line/cubic call in order; dots give (c, c)."""
        out: list[tuple[Point, Point]] = []
        for call in self.calls:
            if call[0] == "dot":
                out.append((call[1], call[1]))
            elif call[0] == "line":
                out.append((call[1], call[2]))
            elif call[0] == "cubic":
                out.append((call[1], call[4]))
        return out


class RecordingDisplay:
    def __init__(self, size: tuple[int, int] = (100, 100)) -> None:
        self._size = size
        self.canvas = RecordingCanvas()
        self.frames = 0

    def size(self) -> tuple[int, int]:
        return self._size

    def begin_frame(self) -> RecordingCanvas:
        self.canvas = RecordingCanvas()
        return self.canvas

    def end_frame(self) -> None:
        self.frames += 1

    def save_png(self, path: str) -> None:
        Path(path).write_bytes(b"")


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("GLYPHBOARD_HOME", str(home))
    return home


@pytest.fixture
def style() -> StrokeStyle:
    return StrokeStyle(width=3.0, color=(10, 20, 30, 255))


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def recording_display() -> RecordingDisplay:
    return RecordingDisplay()
