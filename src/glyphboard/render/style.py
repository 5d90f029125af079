"""Stroke style passed from the host through the board to the canvas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Color = Tuple[int, int, int, int]


class LineCap(str, Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """Width, color and cap of a rendered stroke.

    The board and spline fitter never look inside this object; only canvas
    implementations interpret it.
    """

    width: float = 5.0
    color: Color = (0, 0, 255, 255)
    cap: LineCap = LineCap.ROUND
