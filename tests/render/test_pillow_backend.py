from __future__ import annotations

from pathlib import Path

from PIL import Image

from glyphboard.core.board import Board
from glyphboard.platform.display.pillow_backend import PillowDisplayBackend
from glyphboard.render.style import LineCap, StrokeStyle

WHITE = (255, 255, 255, 255)
BLUE = (0, 0, 255, 255)


def _render(board: Board, style: StrokeStyle) -> PillowDisplayBackend:
    backend = PillowDisplayBackend(size=(100, 100))
    canvas = backend.begin_frame()
    canvas.clear(WHITE)
    board.draw(canvas, style)
    backend.end_frame()
    return backend


def test_single_tap_is_visible() -> None:
    board = Board()
    board.begin_drawing((20, 20))
    board.finish()
    backend = _render(board, StrokeStyle(width=6, color=BLUE))
    assert backend.get_pixel(20, 20) == BLUE
    assert backend.get_pixel(60, 60) == WHITE


def test_butt_cap_tap_draws_nothing() -> None:
    board = Board()
    board.begin_drawing((20, 20))
    board.finish()
    backend = _render(board, StrokeStyle(width=6, color=BLUE, cap=LineCap.BUTT))
    assert backend.get_pixel(20, 20) == WHITE


def test_straight_stroke_covers_midpoint() -> None:
    board = Board()
    board.begin_drawing((10, 50))
    board.add_point((90, 50))
    board.finish()
    backend = _render(board, StrokeStyle(width=5, color=BLUE))
    assert backend.get_pixel(50, 50) == BLUE
    assert backend.get_pixel(50, 20) == WHITE


def test_curve_passes_through_samples() -> None:
    pts = [(20, 20), (80, 20), (80, 80), (20, 80)]
    board = Board()
    board.begin_drawing(pts[0])
    for p in pts[1:]:
        board.add_point(p)
    backend = _render(board, StrokeStyle(width=3, color=BLUE))
    for x, y in pts:
        assert backend.get_pixel(x, y) == BLUE
    # the curve never crosses the middle of the "C"
    assert backend.get_pixel(50, 50) == WHITE


def test_save_png(tmp_path: Path) -> None:
    board = Board()
    board.begin_drawing((5, 5))
    board.add_point((50, 50))
    board.finish()
    backend = _render(board, StrokeStyle(width=2, color=BLUE))
    out = tmp_path / "nested" / "frame.png"
    backend.save_png(str(out))
    with Image.open(out) as img:
        assert img.size == (100, 100)
    assert backend.frames == 1
