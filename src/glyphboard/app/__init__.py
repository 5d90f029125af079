"""Application package for GlyphBoard.

Contains the sketch application entrypoint module used by the CLI.
"""

from . import sketch

__all__ = ["sketch"]
