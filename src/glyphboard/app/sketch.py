"""Freehand sketch window (application entrypoint).

Provides the async ``main_async`` runner that opens a pygame window and
the ``_main_headless_async`` runner that replays recorded strokes onto an
offscreen Pillow canvas and optionally exports a PNG.

Replay files are JSON: a list of strokes, each a list of ``[x, y]``
pairs, e.g. ``[[[10, 10], [40, 12], [60, 30]], [[100, 100]]]``.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path
from typing import Any, List, Sequence

from glyphboard.config import (
    RuntimeConfig,
    make_runtime_config,
    parse_color,
    parse_size,
)
from glyphboard.platform.display.pillow_backend import PillowDisplayBackend
from glyphboard.settings.store import SettingsStore
from glyphboard.ui.controllers import SketchController

logger = logging.getLogger(__name__)


def load_strokes(path: str | Path) -> List[List[tuple[float, float]]]:
    """Read a replay file. Raises ValueError if the structure is wrong."""
    try:
        raw: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of strokes")
    strokes: List[List[tuple[float, float]]] = []
    for i, stroke in enumerate(raw):
        if not isinstance(stroke, list) or not stroke:
            raise ValueError(f"{path}: stroke {i} must be a non-empty list")
        pts: List[tuple[float, float]] = []
        for pt in stroke:
            if (
                not isinstance(pt, (list, tuple))
                or len(pt) != 2
                or not all(
                    isinstance(c, (int, float))
                    and not isinstance(c, bool)
                    and math.isfinite(c)
                    for c in pt
                )
            ):
                raise ValueError(f"{path}: stroke {i} has a malformed point {pt!r}")
            pts.append((float(pt[0]), float(pt[1])))
        strokes.append(pts)
    return strokes


def _print_help() -> None:
    print("Drag with the left button to draw. Keys: c clear, q/ESC quit")


def _maybe_save_settings(args: argparse.Namespace, rc: RuntimeConfig) -> None:
    if getattr(args, "save_settings", False):
        SettingsStore.save(rc.settings)
        logger.info("saved settings to %s", SettingsStore.settings_path())


async def main_async(args: argparse.Namespace) -> None:
    from glyphboard.platform.display.pygame_backend import PygameDisplayBackend
    from glyphboard.platform.input.pygame_input import PygameInputBackend

    rc = make_runtime_config(args=args)
    _maybe_save_settings(args, rc)
    display = PygameDisplayBackend(size=rc.size, create_window=True)
    if not display.has_window:
        logger.warning("no window available; drawing offscreen only")
    controller = SketchController(
        display=display,
        style=rc.style,
        background=rc.background,
        input_source=PygameInputBackend(),
        target_fps=rc.target_fps,
    )
    if args.replay:
        controller.replay(load_strokes(args.replay))

    _print_help()
    await controller.run()

    if args.export:
        display.save_png(args.export)
        logger.info("exported %s", args.export)


async def _main_headless_async(args: argparse.Namespace) -> None:
    """Headless runner for CI and batch export.

    Replays ``--replay`` (if any) onto a Pillow backend, renders a single
    frame and writes ``--export`` (if any). No window or SDL is needed.
    """
    rc = make_runtime_config(args=args)
    _maybe_save_settings(args, rc)
    controller = build_headless(rc)
    if args.replay:
        strokes = load_strokes(args.replay)
        controller.replay(strokes)
        logger.info(
            "replayed %d stroke(s), %d rejected event(s)",
            len(strokes),
            controller.rejected,
        )
    controller.render_frame()
    if args.export:
        controller.display.save_png(args.export)
        logger.info("exported %s", args.export)


def build_headless(rc: RuntimeConfig) -> SketchController:
    display = PillowDisplayBackend(size=rc.size, background=rc.background)
    return SketchController(
        display=display,
        style=rc.style,
        background=rc.background,
        target_fps=rc.target_fps,
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """

    def _size(s: str) -> tuple[int, int]:
        try:
            return parse_size(s)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    def _color(s: str) -> tuple[int, int, int, int]:
        try:
            return parse_color(s)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    def _positive(s: str) -> float:
        try:
            v = float(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a number: {s!r}") from None
        if not math.isfinite(v) or v <= 0:
            raise argparse.ArgumentTypeError(f"must be a finite value > 0: {s!r}")
        return v

    p = argparse.ArgumentParser(description="GlyphBoard freehand sketch pad")
    p.add_argument(
        "--version",
        action="store_true",
        help="Print the version and exit",
    )
    p.add_argument(
        "--headless",
        action="store_true",
        help="Render offscreen with Pillow instead of opening a window",
    )
    p.add_argument(
        "--replay",
        type=str,
        default=None,
        help="Path to a JSON list of strokes to draw before accepting input",
    )
    p.add_argument(
        "--export",
        type=str,
        default=None,
        help="Write the final frame to this PNG path",
    )
    p.add_argument(
        "--size",
        type=_size,
        default=None,
        help="Canvas size W,H in px (default: from settings)",
    )
    p.add_argument(
        "--fps",
        type=_positive,
        default=None,
        help="Target repaint rate (default: from settings)",
    )
    p.add_argument(
        "--stroke-width",
        dest="stroke_width",
        type=_positive,
        default=None,
        help="Stroke width in px (default: from settings)",
    )
    p.add_argument(
        "--color",
        type=_color,
        default=None,
        help="Stroke color: palette name or R,G,B[,A]",
    )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Store the effective settings as the new defaults",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return p.parse_args(argv)
