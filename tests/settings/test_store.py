from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from glyphboard.render.style import LineCap, StrokeStyle
from glyphboard.settings.schema import Settings
from glyphboard.settings.store import SettingsStore
from glyphboard.settings.values import CANVAS_DEFAULTS, PALETTE, STROKE_DEFAULTS


def test_load_defaults_without_file(_isolated_home: Path) -> None:
    s = SettingsStore.load()
    assert isinstance(s, Settings)
    assert s.stroke_width == STROKE_DEFAULTS["width"]
    assert s.line_cap is LineCap.ROUND
    # loading never creates the file
    assert not SettingsStore.settings_path().exists()


def test_roundtrip(_isolated_home: Path) -> None:
    s = Settings(stroke_width=2.5, stroke_color=[200, 10, 10], line_cap="square")
    SettingsStore.save(s)
    assert SettingsStore.settings_path().parent == _isolated_home
    s2 = SettingsStore.load()
    assert s2.stroke_width == 2.5
    assert s2.stroke_color == (200, 10, 10, 255)
    assert s2.line_cap is LineCap.SQUARE


def test_corrupt_returns_default(_isolated_home: Path) -> None:
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{broken")
    assert SettingsStore.load() == Settings()


def test_invalid_values_return_default(_isolated_home: Path) -> None:
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"stroke_width": -1}))
    assert SettingsStore.load().stroke_width == STROKE_DEFAULTS["width"]


@pytest.mark.parametrize(
    "field,value",
    [
        ("stroke_width", 0),
        ("target_fps", -5),
        ("width", 0),
        ("stroke_color", [1, 2]),
        ("background", [0, 0, 256]),
        ("line_cap", "triangle"),
    ],
)
def test_validation(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_stroke_style() -> None:
    s = Settings(stroke_width=7, stroke_color=(1, 2, 3, 4), line_cap="butt")
    assert s.stroke_style() == StrokeStyle(
        width=7.0, color=(1, 2, 3, 4), cap=LineCap.BUTT
    )


def test_values_yaml_loaded() -> None:
    assert CANVAS_DEFAULTS["width"] == 800
    assert CANVAS_DEFAULTS["background"] == (255, 255, 255, 255)
    assert PALETTE["red"] == (220, 30, 30, 255)
