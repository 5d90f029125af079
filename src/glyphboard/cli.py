"""Command-line interface for GlyphBoard.

Thin wrapper over :mod:`glyphboard.app.sketch` so that the console
script and ``python -m glyphboard`` run the same code.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from glyphboard import __version__
from glyphboard.app import sketch


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Return parsed arguments using the app's parser helper."""
    return sketch.parse_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the GlyphBoard CLI."""
    args = parse_args(argv)
    if args.version:
        print(f"GlyphBoard {__version__}")
        return
    _configure_logging(args.log_level)

    try:
        asyncio.run(run_async(argv))
    except KeyboardInterrupt:
        # Allow graceful cancellation via Ctrl+C
        pass


async def run_async(argv: list[str] | None = None) -> None:
    """Async entrypoint for programmatic usage/testing.

    Tests and programmatic callers can `await run_async(...)` to run the
    application without starting a nested event loop.
    """
    args = parse_args(argv)
    if args.version:
        print(f"GlyphBoard {__version__}")
        return

    if args.headless:
        await sketch._main_headless_async(args)
    else:
        await sketch.main_async(args)


if __name__ == "__main__":
    main()
