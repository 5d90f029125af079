"""Smooth curve fitting for freehand glyphs.

A glyph is a list of sampled pointer positions. Rather than joining them
with straight lines, each consecutive pair is connected by a cubic Bezier
segment whose handles follow the local direction of travel, so the curve
passes through every sample and keeps a continuous tangent at the joins.

Handle placement for the segment ``origin -> dest`` uses a 4-point window
``prev, origin, dest, next``:

    h1 = origin + unit(dest - prev)   * |dest - origin| / 3
    h2 = dest   - unit(next - origin) * |dest - origin| / 3

The first segment has no ``prev`` and leaves ``origin`` along the chord;
the last has no ``next`` and enters ``dest`` along the chord. One-point
glyphs render as a dot and two-point glyphs as a straight line.

Usage:
    segments = fit_glyph([(0, 0), (10, 0), (10, 10)], style)
    render_segments(canvas, segments)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Sequence, Union

from .geometry import Point, PointLike, add, as_point, length, scale, sub, unit

if TYPE_CHECKING:
    from glyphboard.render.canvas import Canvas

__all__ = [
    "HANDLE_RATIO",
    "Dot",
    "LineSegment",
    "CubicSegment",
    "Segment",
    "fit_glyph",
    "render_segments",
    "draw_points",
    "flatten_cubic",
    "cubic_steps",
]

# Fraction of the chord length used for each handle.
HANDLE_RATIO = 1.0 / 3.0


@dataclass(frozen=True, slots=True)
class Dot:
    center: Point
    style: Any


@dataclass(frozen=True, slots=True)
class LineSegment:
    start: Point
    end: Point
    style: Any


@dataclass(frozen=True, slots=True)
class CubicSegment:
    start: Point
    handle1: Point
    handle2: Point
    end: Point
    style: Any


Segment = Union[Dot, LineSegment, CubicSegment]


def _leading_handle(prev: Point, origin: Point, dest: Point, reach: float) -> Point:
    return add(origin, scale(unit(sub(dest, prev)), reach))


def _trailing_handle(origin: Point, dest: Point, nxt: Point, reach: float) -> Point:
    return sub(dest, scale(unit(sub(nxt, origin)), reach))


def fit_glyph(points: Sequence[PointLike], style: Any) -> List[Segment]:
    """Return the curve primitives that draw *points*.

    ``style`` is attached to every primitive untouched. Raises
    ``ValueError`` only for an empty sequence, which a glyph never is.
    """
    pts = [as_point(p) for p in points]
    n = len(pts)
    if n == 0:
        raise ValueError("a glyph has at least one point")
    if n == 1:
        return [Dot(pts[0], style)]
    if n == 2:
        return [LineSegment(pts[0], pts[1], style)]

    out: List[Segment] = []
    for i in range(n - 1):
        origin = pts[i]
        dest = pts[i + 1]
        delta = sub(dest, origin)
        reach = length(delta) * HANDLE_RATIO

        if i == 0:
            h1 = add(origin, scale(delta, HANDLE_RATIO))
        else:
            h1 = _leading_handle(pts[i - 1], origin, dest, reach)

        if i == n - 2:
            h2 = sub(dest, scale(delta, HANDLE_RATIO))
        else:
            h2 = _trailing_handle(origin, dest, pts[i + 2], reach)

        out.append(CubicSegment(origin, h1, h2, dest, style))
    return out


def render_segments(canvas: "Canvas", segments: Sequence[Segment]) -> None:
    for seg in segments:
        if isinstance(seg, CubicSegment):
            canvas.cubic(seg.start, seg.handle1, seg.handle2, seg.end, seg.style)
        elif isinstance(seg, LineSegment):
            canvas.line(seg.start, seg.end, seg.style)
        else:
            canvas.dot(seg.center, seg.style)


def draw_points(canvas: "Canvas", points: Sequence[PointLike], style: Any) -> None:
    """Fit *points* and emit the result onto *canvas*."""
    render_segments(canvas, fit_glyph(points, style))


def flatten_cubic(
    p0: PointLike, h1: PointLike, h2: PointLike, p1: PointLike, steps: int = 16
) -> List[Point]:
    """Sample a cubic Bezier into ``steps + 1`` points.

    The first and last samples are exactly ``p0`` and ``p1`` so flattened
    segments still meet at the original glyph points.
    """
    steps = max(1, int(steps))
    a = as_point(p0)
    b = as_point(h1)
    c = as_point(h2)
    d = as_point(p1)
    out = [a]
    for k in range(1, steps):
        t = k / steps
        mt = 1.0 - t
        w0 = mt * mt * mt
        w1 = 3.0 * mt * mt * t
        w2 = 3.0 * mt * t * t
        w3 = t * t * t
        out.append(
            Point(
                w0 * a.x + w1 * b.x + w2 * c.x + w3 * d.x,
                w0 * a.y + w1 * b.y + w2 * c.y + w3 * d.y,
            )
        )
    out.append(d)
    return out


def cubic_steps(p0: PointLike, h1: PointLike, h2: PointLike, p1: PointLike) -> int:
    """Pick a flattening step count proportional to the control polygon length."""
    poly = length(sub(h1, p0)) + length(sub(h2, h1)) + length(sub(p1, h2))
    return max(1, min(64, int(poly / 3.0) + 1))
