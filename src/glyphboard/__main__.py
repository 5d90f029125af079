"""Console entrypoint for the glyphboard application.

Delegates to :mod:`glyphboard.cli` so that ``python -m glyphboard`` and
the installed ``glyphboard`` console script execute the same code.
"""

from __future__ import annotations

from glyphboard.cli import main as cli_main


def main() -> None:
    cli_main()


if __name__ == "__main__":
    main()
