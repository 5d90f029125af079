"""Planar point type and the small vector helpers used by the spline fitter.

Points are plain immutable ``(x, y)`` pairs so callers may pass ordinary
tuples; every helper returns a :class:`Point`.
"""

from __future__ import annotations

from math import hypot
from typing import NamedTuple, Tuple, Union

__all__ = [
    "Point",
    "PointLike",
    "as_point",
    "add",
    "sub",
    "scale",
    "length",
    "unit",
]


class Point(NamedTuple):
    x: float
    y: float


PointLike = Union[Point, Tuple[float, float]]

ZERO = Point(0.0, 0.0)


def as_point(p: PointLike) -> Point:
    """Coerce a 2-sequence of numbers into a float :class:`Point`."""
    x, y = p
    return Point(float(x), float(y))


def add(a: PointLike, b: PointLike) -> Point:
    return Point(a[0] + b[0], a[1] + b[1])


def sub(a: PointLike, b: PointLike) -> Point:
    return Point(a[0] - b[0], a[1] - b[1])


def scale(v: PointLike, k: float) -> Point:
    return Point(v[0] * k, v[1] * k)


def length(v: PointLike) -> float:
    return hypot(v[0], v[1])


def unit(v: PointLike) -> Point:
    """Return *v* normalized to length 1, or the zero vector if *v* is zero."""
    n = length(v)
    if n == 0.0:
        return ZERO
    return Point(v[0] / n, v[1] / n)
