"""UI package: the interactive sketch controller."""

from .controllers import SketchController  # re-export for convenience

__all__ = ["SketchController"]
