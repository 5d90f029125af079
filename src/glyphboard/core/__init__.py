"""Glyph board state machine and curve fitting."""

from .board import (
    ActiveBoard,
    Board,
    ExpectedActiveState,
    ExpectedStaticState,
    Glyph,
    StaticBoard,
    WrongBoardStateError,
)
from .geometry import Point
from .spline import CubicSegment, Dot, LineSegment, fit_glyph

__all__ = [
    "ActiveBoard",
    "Board",
    "CubicSegment",
    "Dot",
    "ExpectedActiveState",
    "ExpectedStaticState",
    "Glyph",
    "LineSegment",
    "Point",
    "StaticBoard",
    "WrongBoardStateError",
    "fit_glyph",
]
