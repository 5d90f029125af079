"""Pygame InputBackend mapping mouse events to pointer events.

Left-button press, drag and release become ``down``, ``move`` and ``up``
pointer events. Motion without the left button held is dropped. Key
presses and window close are forwarded so the controller can react.
In headless mode (dummy video) pygame may not deliver events; tests can
synthesize them by posting to the pygame event queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Union

pg: Any = None
try:  # pragma: no cover - optional dependency in CI
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None

_LEFT_BUTTON = 1


@dataclass(slots=True)
class PointerEvent:
    type: str  # "down" | "move" | "up"
    x: float
    y: float
    ts: float


@dataclass(slots=True)
class KeyEvent:
    name: str


@dataclass(slots=True)
class QuitEvent:
    pass


InputEvent = Union[PointerEvent, KeyEvent, QuitEvent]


class PygameInputBackend:
    """Collects pygame events and emits pointer/key/quit events.

    Use pump() in a loop to process events.
    """

    def __init__(self) -> None:
        if pg is None:
            raise RuntimeError("pygame not available for input backend")

    def pump(self) -> Generator[InputEvent, None, None]:
        for ev in pg.event.get():
            ts = float(pg.time.get_ticks()) / 1000.0
            if ev.type == pg.QUIT:
                yield QuitEvent()
            elif ev.type == pg.KEYDOWN:
                yield KeyEvent(pg.key.name(ev.key))
            elif ev.type == pg.MOUSEBUTTONDOWN and ev.button == _LEFT_BUTTON:
                yield PointerEvent("down", float(ev.pos[0]), float(ev.pos[1]), ts)
            elif ev.type == pg.MOUSEMOTION and ev.buttons[0]:
                yield PointerEvent("move", float(ev.pos[0]), float(ev.pos[1]), ts)
            elif ev.type == pg.MOUSEBUTTONUP and ev.button == _LEFT_BUTTON:
                yield PointerEvent("up", float(ev.pos[0]), float(ev.pos[1]), ts)
