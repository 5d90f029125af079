from __future__ import annotations

import pytest

from glyphboard.core.board import (
    ActiveBoard,
    Board,
    ExpectedActiveState,
    ExpectedStaticState,
    StaticBoard,
    WrongBoardStateError,
)
from glyphboard.core.geometry import Point
from glyphboard.render.style import StrokeStyle


def test_fresh_board_is_static_and_empty() -> None:
    board = Board()
    assert board.is_active() is False
    assert board.glyphs == ()


def test_begin_drawing_activates() -> None:
    board = Board()
    board.begin_drawing((3, 4))
    assert board.is_active() is True
    assert board.current_glyph.points == (Point(3.0, 4.0),)
    assert board.glyphs == ()


def test_begin_drawing_twice_fails_without_effect() -> None:
    board = Board()
    board.begin_drawing((0, 0))
    board.add_point((1, 1))
    before = board.current_glyph
    with pytest.raises(ExpectedStaticState) as ei:
        board.begin_drawing((5, 5))
    assert board.is_active()
    assert board.current_glyph is before
    assert board.current_glyph.points == (Point(0, 0), Point(1, 1))
    assert ei.value.is_active is True
    assert str(ei.value) == (
        "A glyph is already being drawn, so cannot start drawing another glyph"
    )


def test_add_point_while_static_fails() -> None:
    board = Board()
    with pytest.raises(ExpectedActiveState) as ei:
        board.add_point((1, 1))
    assert not board.is_active()
    assert board.glyphs == ()
    assert ei.value.is_active is False
    assert "cannot add a point" in str(ei.value)


def test_finish_while_static_fails() -> None:
    board = Board()
    board.begin_drawing((0, 0))
    board.finish()
    glyphs = board.glyphs
    with pytest.raises(ExpectedActiveState):
        board.finish()
    assert board.glyphs == glyphs
    assert not board.is_active()


def test_current_glyph_requires_active() -> None:
    with pytest.raises(ExpectedActiveState, match="there is no current glyph"):
        Board().current_glyph


def test_errors_share_base_class() -> None:
    assert issubclass(ExpectedStaticState, WrongBoardStateError)
    assert issubclass(ExpectedActiveState, WrongBoardStateError)
    assert str(ExpectedActiveState()) == "No glyph is currently being drawn"


def test_round_trip_appends_glyph_with_exact_points() -> None:
    board = Board()
    pts = [(0.0, 0.0), (1.5, 2.0), (1.5, 2.0), (-3.0, 7.25)]
    board.begin_drawing(pts[0])
    for p in pts[1:]:
        board.add_point(p)
    board.finish()
    assert not board.is_active()
    assert len(board.glyphs) == 1
    assert board.glyphs[0].points == tuple(Point(*p) for p in pts)


def test_previous_glyphs_are_moved_not_copied() -> None:
    board = Board()
    board.begin_drawing((0, 0))
    board.finish()
    first = board.glyphs[0]
    board.begin_drawing((10, 10))
    assert board.glyphs[0] is first
    board.finish()
    assert board.glyphs[0] is first
    assert len(board.glyphs) == 2


def test_misuse_sequence_guard_is_independent_of_call_count() -> None:
    board = Board()
    with pytest.raises(ExpectedActiveState):
        board.add_point((1, 1))
    board.begin_drawing((0, 0))
    for _ in range(3):
        with pytest.raises(ExpectedStaticState):
            board.begin_drawing((5, 5))
    assert board.current_glyph.points == (Point(0, 0),)
    board.finish()
    assert board.glyphs[0].points == (Point(0, 0),)


def test_static_and_active_boards_hand_over_contents() -> None:
    static = StaticBoard()
    active = static.begin_drawing((1, 2))
    assert isinstance(active, ActiveBoard)
    active.add_point((3, 4))
    back = active.finish()
    assert back is static
    assert len(back) == 1
    assert back.glyphs[0].points == (Point(1, 2), Point(3, 4))


def test_draw_orders_finished_then_current(canvas, style: StrokeStyle) -> None:
    board = Board()
    board.begin_drawing((0, 0))
    board.finish()
    board.begin_drawing((10, 0))
    board.add_point((20, 0))
    board.finish()
    board.begin_drawing((30, 30))

    board.draw(canvas, style)

    assert [c[0] for c in canvas.calls] == ["dot", "line", "dot"]
    assert canvas.endpoints() == [
        (Point(0, 0), Point(0, 0)),
        (Point(10, 0), Point(20, 0)),
        (Point(30, 30), Point(30, 30)),
    ]
    assert all(c[-1] is style for c in canvas.calls)


def test_draw_reflects_live_points_without_changing_state(canvas, style) -> None:
    board = Board()
    board.begin_drawing((0, 0))
    board.add_point((5, 0))
    board.add_point((5, 5))
    board.draw(canvas, style)
    assert [c[0] for c in canvas.calls] == ["cubic", "cubic"]
    assert board.is_active()
    assert len(board.current_glyph) == 3


def test_draw_empty_board_emits_nothing(canvas, style) -> None:
    Board().draw(canvas, style)
    assert canvas.calls == []
