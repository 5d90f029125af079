"""
Interactive sketch controller for GlyphBoard.

Provides a SketchController that owns the board, the frame tick and input
routing. Pointer presses, drags and releases become board transitions; a
render pass redraws every glyph each frame so the stroke in progress is
visible while it is being drawn.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional, Protocol, Sequence

from glyphboard.core.board import Board, WrongBoardStateError
from glyphboard.core.geometry import PointLike
from glyphboard.core.time import RealTimeSource, TimeSource
from glyphboard.platform.input.pygame_input import (
    InputEvent,
    KeyEvent,
    PointerEvent,
    QuitEvent,
)
from glyphboard.render.canvas import DisplayBackend
from glyphboard.render.style import Color, StrokeStyle

logger = logging.getLogger(__name__)

_QUIT_KEYS = {"q", "escape"}
_CLEAR_KEY = "c"


class InputSource(Protocol):
    def pump(self) -> Iterable[InputEvent]:
        ...


class SketchController:
    """Routes input to a Board and renders it onto a display backend.

    All board calls and renders happen on the task running :meth:`run` (or
    the caller of :meth:`step`), so the board is never observed mid-change.
    """

    def __init__(
        self,
        *,
        display: DisplayBackend,
        style: StrokeStyle,
        background: Color = (255, 255, 255, 255),
        input_source: Optional[InputSource] = None,
        ts: Optional[TimeSource] = None,
        target_fps: float = 60.0,
        board: Optional[Board] = None,
    ) -> None:
        self._display = display
        self._input = input_source
        self._ts: TimeSource = ts if ts is not None else RealTimeSource()
        self.style = style
        self.background = background
        if not target_fps > 0:
            raise ValueError(f"target_fps must be > 0, got {target_fps!r}")
        self.target_fps = float(target_fps)
        self.board = board if board is not None else Board()
        self.rejected = 0
        self._running = False

    @property
    def display(self) -> DisplayBackend:
        return self._display

    @property
    def running(self) -> bool:
        return self._running

    # Input ----------------------------------------------------------------
    def handle_pointer(self, ev: PointerEvent) -> bool:
        """Apply a pointer event to the board.

        Returns False when the board rejected it (for example a ``move``
        with no stroke in progress); the rejection is logged and the board
        is unchanged.
        """
        point = (ev.x, ev.y)
        try:
            if ev.type == "down":
                self.board.begin_drawing(point)
            elif ev.type == "move":
                self.board.add_point(point)
            elif ev.type == "up":
                self.board.finish()
            else:
                raise ValueError(f"unknown pointer event type {ev.type!r}")
        except WrongBoardStateError as exc:
            self.rejected += 1
            logger.debug("ignoring %s at (%.1f, %.1f): %s", ev.type, ev.x, ev.y, exc)
            return False
        return True

    def handle_key(self, name: str) -> None:
        key = name.lower()
        if key in _QUIT_KEYS:
            self._running = False
        elif key == _CLEAR_KEY:
            # Glyphs are only ever dropped by discarding the whole board.
            self.board = Board()
            logger.info("board cleared")

    def process_input(self) -> None:
        if self._input is None:
            return
        for ev in self._input.pump():
            if isinstance(ev, PointerEvent):
                self.handle_pointer(ev)
            elif isinstance(ev, KeyEvent):
                self.handle_key(ev.name)
            elif isinstance(ev, QuitEvent):
                self._running = False

    def replay(self, strokes: Sequence[Sequence[PointLike]]) -> None:
        """Feed recorded strokes through the same path as live pointer input."""
        t = 0.0
        for stroke in strokes:
            if not stroke:
                continue
            x, y = stroke[0]
            self.handle_pointer(PointerEvent("down", float(x), float(y), t))
            for x, y in stroke[1:]:
                self.handle_pointer(PointerEvent("move", float(x), float(y), t))
            x, y = stroke[-1]
            self.handle_pointer(PointerEvent("up", float(x), float(y), t))
            t += 1.0

    # Rendering ------------------------------------------------------------
    def render_frame(self) -> None:
        canvas = self._display.begin_frame()
        canvas.clear(self.background)
        self.board.draw(canvas, self.style)
        self._display.end_frame()

    def step(self) -> None:
        self.process_input()
        self.render_frame()

    async def run(self) -> None:
        self._running = True
        dt_target = 1.0 / self.target_fps
        try:
            while self._running:
                t0 = self._ts.monotonic()
                self.step()
                remaining = dt_target - max(0.0, self._ts.monotonic() - t0)
                if remaining > 0:
                    await self._ts.sleep(remaining)
                else:
                    # Yield to avoid starving other tasks
                    await asyncio.sleep(0)
        finally:
            self._running = False

    def stop(self) -> None:
        self._running = False
