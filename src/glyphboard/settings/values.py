"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. Missing sections or
malformed entries fall back to the hard-coded literals below so the
application can still run with a partial file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

RGBA = Tuple[int, int, int, int]

# --- Fallback literals ---------------------------------------------------
_FALLBACK_STROKE: Dict[str, Any] = {
    "width": 5.0,
    "color": (0, 0, 255, 255),
    "cap": "round",
}
_FALLBACK_CANVAS: Dict[str, Any] = {
    "width": 800,
    "height": 600,
    "background": (255, 255, 255, 255),
    "target_fps": 60.0,
}
_FALLBACK_PALETTE: Dict[str, RGBA] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "blue": (0, 0, 255, 255),
}


def _rgba(v: Any) -> RGBA | None:
    """Return *v* as an RGBA tuple, or None if it is not 3 or 4 ints in 0-255."""
    if not isinstance(v, (list, tuple)) or len(v) not in (3, 4):
        return None
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in v):
        return None
    r, g, b, *rest = v
    return (r, g, b, rest[0] if rest else 255)


def _load(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable %s: %s", path, exc)
        return {}
    return raw if isinstance(raw, dict) else {}


_stroke: Dict[str, Any] = dict(_FALLBACK_STROKE)
_canvas: Dict[str, Any] = dict(_FALLBACK_CANVAS)
_palette: Dict[str, RGBA] = dict(_FALLBACK_PALETTE)

_raw = _load(_YAML_PATH)

_stroke_raw = _raw.get("stroke")
if isinstance(_stroke_raw, dict):
    if isinstance(_stroke_raw.get("width"), (int, float)) and _stroke_raw["width"] > 0:
        _stroke["width"] = float(_stroke_raw["width"])
    color = _rgba(_stroke_raw.get("color"))
    if color is not None:
        _stroke["color"] = color
    if _stroke_raw.get("cap") in {"butt", "round", "square"}:
        _stroke["cap"] = _stroke_raw["cap"]

_canvas_raw = _raw.get("canvas")
if isinstance(_canvas_raw, dict):
    for k in ("width", "height"):
        v = _canvas_raw.get(k)
        if isinstance(v, int) and v > 0:
            _canvas[k] = v
    bg = _rgba(_canvas_raw.get("background"))
    if bg is not None:
        _canvas["background"] = bg
    fps = _canvas_raw.get("target_fps")
    if isinstance(fps, (int, float)) and fps > 0:
        _canvas["target_fps"] = float(fps)

_palette_raw = _raw.get("palette")
if isinstance(_palette_raw, dict):
    for name, v in _palette_raw.items():
        rgba = _rgba(v)
        if isinstance(name, str) and rgba is not None:
            _palette[name.lower()] = rgba

# --- Public accessors ----------------------------------------------------
STROKE_DEFAULTS: Dict[str, Any] = dict(_stroke)
CANVAS_DEFAULTS: Dict[str, Any] = dict(_canvas)
PALETTE: Dict[str, RGBA] = dict(_palette)

__all__ = [
    "STROKE_DEFAULTS",
    "CANVAS_DEFAULTS",
    "PALETTE",
]
