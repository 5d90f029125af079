"""Stroke lifecycle: the board of finished glyphs and the glyph being drawn.

The board is always in exactly one of two states:

* ``StaticBoard`` - every glyph is finished; a new one may be started.
* ``ActiveBoard`` - wraps the StaticBoard plus the single glyph currently
  being extended.

``Board`` owns whichever of the two is current and performs transitions by
handing the old state's contents to the new state. ``begin_drawing`` turns
the StaticBoard into an ActiveBoard, and ``finish`` hands the ActiveBoard's
glyph and wrapped StaticBoard back as the new StaticBoard. Nothing is copied,
so previously finished glyphs are the same objects after any number of
strokes.

Misuse (starting a second glyph, adding points or finishing while idle)
raises a :class:`WrongBoardStateError` subclass and leaves the board
untouched. Input events arrive in odd orders often enough (a release event
delivered twice) that callers are expected to catch and ignore these.

Example:
    board = Board()
    board.begin_drawing((0, 0))
    board.add_point((10, 0))
    board.finish()
    board.draw(canvas, StrokeStyle())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .geometry import Point, PointLike, as_point
from .spline import Segment, fit_glyph, render_segments

if TYPE_CHECKING:
    from glyphboard.render.canvas import Canvas
    from glyphboard.render.style import StrokeStyle

__all__ = [
    "WrongBoardStateError",
    "ExpectedStaticState",
    "ExpectedActiveState",
    "Glyph",
    "StaticBoard",
    "ActiveBoard",
    "Board",
]

logger = logging.getLogger(__name__)


class WrongBoardStateError(Exception):
    """An operation was attempted in the wrong board state.

    ``is_active`` records the state the board was actually in;
    ``description`` optionally says what the caller was trying to do.
    """

    def __init__(self, is_active: bool, description: Optional[str] = None) -> None:
        self.is_active = is_active
        self.description = description
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.is_active:
            msg = "A glyph is already being drawn"
        else:
            msg = "No glyph is currently being drawn"
        if self.description:
            msg += f", so {self.description}"
        return msg


class ExpectedStaticState(WrongBoardStateError):
    """The board had to be idle but a glyph is in progress."""

    def __init__(self, description: Optional[str] = None) -> None:
        super().__init__(True, description)


class ExpectedActiveState(WrongBoardStateError):
    """The board had to be mid-stroke but no glyph is in progress."""

    def __init__(self, description: Optional[str] = None) -> None:
        super().__init__(False, description)


class Glyph:
    """One continuous stroke as an ordered sequence of points.

    Points can only be appended by the :class:`ActiveBoard` that owns the
    glyph; once finished the glyph is never modified again.
    """

    __slots__ = ("_points",)

    def __init__(self, initial_point: PointLike) -> None:
        self._points: List[Point] = [as_point(initial_point)]

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Glyph(points={self._points!r})"

    def _append(self, point: Point) -> None:
        self._points.append(point)

    def segments(self, style: "StrokeStyle") -> List[Segment]:
        return fit_glyph(self._points, style)

    def draw(self, canvas: "Canvas", style: "StrokeStyle") -> None:
        render_segments(canvas, self.segments(style))


class StaticBoard:
    """Finished glyphs in draw order (first is bottom-most)."""

    __slots__ = ("_glyphs",)

    def __init__(self) -> None:
        self._glyphs: List[Glyph] = []

    @property
    def glyphs(self) -> Tuple[Glyph, ...]:
        return tuple(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def begin_drawing(self, initial_point: PointLike) -> "ActiveBoard":
        """Hand this board to a new ActiveBoard drawing from *initial_point*."""
        return ActiveBoard(self, Glyph(initial_point))

    def draw(self, canvas: "Canvas", style: "StrokeStyle") -> None:
        for glyph in self._glyphs:
            glyph.draw(canvas, style)


class ActiveBoard:
    """A StaticBoard together with the glyph currently being drawn."""

    __slots__ = ("_board", "_current_glyph")

    def __init__(self, board: StaticBoard, current_glyph: Glyph) -> None:
        self._board = board
        self._current_glyph = current_glyph

    @property
    def current_glyph(self) -> Glyph:
        return self._current_glyph

    @property
    def glyphs(self) -> Tuple[Glyph, ...]:
        return self._board.glyphs

    def add_point(self, point: PointLike) -> None:
        self._current_glyph._append(as_point(point))

    def finish(self) -> StaticBoard:
        """Append the current glyph on top and return the wrapped StaticBoard."""
        board = self._board
        board._glyphs.append(self._current_glyph)
        return board

    def draw(self, canvas: "Canvas", style: "StrokeStyle") -> None:
        self._board.draw(canvas, style)
        self._current_glyph.draw(canvas, style)


class Board:
    """Owns either a StaticBoard or an ActiveBoard and mediates all changes."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state: Union[StaticBoard, ActiveBoard] = StaticBoard()

    def __repr__(self) -> str:
        tag = "Active" if self.is_active() else "Static"
        return f"Board({tag}, glyphs={len(self.glyphs)})"

    def begin_drawing(self, initial_point: PointLike) -> None:
        state = self._state
        if not isinstance(state, StaticBoard):
            raise ExpectedStaticState("cannot start drawing another glyph")
        point = as_point(initial_point)
        self._state = state.begin_drawing(point)
        logger.debug("glyph started at (%.1f, %.1f)", point.x, point.y)

    def add_point(self, point: PointLike) -> None:
        state = self._state
        if not isinstance(state, ActiveBoard):
            raise ExpectedActiveState("cannot add a point to the current glyph")
        state.add_point(point)

    def finish(self) -> None:
        state = self._state
        if not isinstance(state, ActiveBoard):
            raise ExpectedActiveState("cannot finish drawing the current glyph")
        n_points = len(state.current_glyph)
        self._state = state.finish()
        logger.debug(
            "glyph finished with %d point(s); %d glyph(s) on board",
            n_points,
            len(self._state.glyphs),
        )

    def is_active(self) -> bool:
        return isinstance(self._state, ActiveBoard)

    @property
    def current_glyph(self) -> Glyph:
        state = self._state
        if not isinstance(state, ActiveBoard):
            raise ExpectedActiveState("there is no current glyph")
        return state.current_glyph

    @property
    def glyphs(self) -> Tuple[Glyph, ...]:
        """Finished glyphs in draw order; excludes the one in progress."""
        return self._state.glyphs

    def draw(self, canvas: "Canvas", style: "StrokeStyle") -> None:
        self._state.draw(canvas, style)
