"""Runtime configuration helpers.

Merges the persisted Settings store with CLI overrides into the
RuntimeConfig the application runs with. The core board never reads this
module; the host passes the resulting StrokeStyle into ``Board.draw``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .render.style import Color, StrokeStyle
from .settings.schema import Settings
from .settings.store import SettingsStore
from .settings.values import PALETTE


@dataclass(slots=True)
class RuntimeConfig:
    size: Tuple[int, int]
    background: Color
    style: StrokeStyle
    target_fps: float
    settings: Settings


def parse_color(s: str) -> Color:
    """Parse a palette name or ``R,G,B[,A]`` into an RGBA tuple.

    Raises ValueError for unknown names and out-of-range components.
    """
    named = PALETTE.get(s.strip().lower())
    if named is not None:
        return named
    try:
        comps = [int(c) for c in s.split(",")]
    except ValueError:
        raise ValueError(f"unknown color {s!r}") from None
    if len(comps) not in (3, 4) or any(c < 0 or c > 255 for c in comps):
        raise ValueError(f"color must be R,G,B[,A] with 0..255 components: {s!r}")
    if len(comps) == 3:
        comps.append(255)
    return (comps[0], comps[1], comps[2], comps[3])


def parse_size(s: str) -> Tuple[int, int]:
    """Parse ``W,H`` (or ``WxH``) into a positive integer pair."""
    parts = s.lower().replace("x", ",").split(",")
    try:
        w, h = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"size must be W,H: {s!r}") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"size must be positive: {s!r}")
    return (w, h)


def make_runtime_config(
    *, args: Optional[object] = None, settings: Optional[Settings] = None
) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and optional CLI *args*.

    Rules:
    - Settings (SettingsStore.load() unless given) provide the defaults.
    - Attributes present and not None on *args* (argparse.Namespace-like)
      override them for this session only: size, fps, stroke_width, color.
    - Overrides go through the Settings validators, so an invalid value
      raises pydantic.ValidationError.
    """
    if settings is None:
        settings = SettingsStore.load()

    if args is not None:
        update: Dict[str, Any] = {}
        a_size = getattr(args, "size", None)
        if a_size is not None:
            update["width"], update["height"] = a_size
        a_fps = getattr(args, "fps", None)
        if a_fps is not None:
            update["target_fps"] = a_fps
        a_width = getattr(args, "stroke_width", None)
        if a_width is not None:
            update["stroke_width"] = a_width
        a_color = getattr(args, "color", None)
        if a_color is not None:
            update["stroke_color"] = a_color
        if update:
            settings = Settings.model_validate({**settings.model_dump(), **update})

    return RuntimeConfig(
        size=(settings.width, settings.height),
        background=tuple(settings.background),
        style=settings.stroke_style(),
        target_fps=float(settings.target_fps),
        settings=settings,
    )
