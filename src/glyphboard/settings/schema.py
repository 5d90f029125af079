"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from glyphboard.render.style import LineCap, StrokeStyle

from .values import CANVAS_DEFAULTS, STROKE_DEFAULTS

RGBA = Tuple[int, int, int, int]


def _check_rgba(v: object, name: str) -> RGBA:
    if not isinstance(v, (list, tuple)) or len(v) not in (3, 4):
        raise ValueError(f"{name} must be [r, g, b] or [r, g, b, a]")
    try:
        comps = [int(c) for c in v]
    except (TypeError, ValueError):
        raise ValueError(f"{name} components must be integers") from None
    if any(c < 0 or c > 255 for c in comps):
        raise ValueError(f"{name} components must be within 0..255")
    if len(comps) == 3:
        comps.append(255)
    return (comps[0], comps[1], comps[2], comps[3])


class Settings(BaseModel):
    """Drawing settings persisted to disk.

    Parameters
    ----------
    stroke_width: Stroke width in pixels.
    stroke_color: RGBA stroke color; a 3-component value gets alpha 255.
    line_cap: ``butt``, ``round`` or ``square``.
    background: RGBA canvas fill color.
    width, height: Canvas size in pixels.
    target_fps: Repaint rate of the interactive window.
    """

    stroke_width: float = Field(default=float(STROKE_DEFAULTS["width"]))
    stroke_color: RGBA = Field(default=tuple(STROKE_DEFAULTS["color"]))
    line_cap: LineCap = Field(default=LineCap(STROKE_DEFAULTS["cap"]))
    background: RGBA = Field(default=tuple(CANVAS_DEFAULTS["background"]))
    width: int = Field(default=int(CANVAS_DEFAULTS["width"]))
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]))
    target_fps: float = Field(default=float(CANVAS_DEFAULTS["target_fps"]))

    @field_validator("stroke_color", "background", mode="before")
    @classmethod
    def _chk_rgba(cls, v: object, info: ValidationInfo) -> RGBA:
        return _check_rgba(v, info.field_name or "color")

    @field_validator("stroke_width", "target_fps")
    @classmethod
    def _chk_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    def stroke_style(self) -> StrokeStyle:
        return StrokeStyle(
            width=float(self.stroke_width),
            color=tuple(self.stroke_color),
            cap=LineCap(self.line_cap),
        )
