"""Editor entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

VERSION = "0.1.0"


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="DreamEngineEditor",
        description="DreamEngine editor.",
        add_help=False,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the engine version; any arguments are ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    _parser().parse_known_args(args)
    sys.stdout.write(f"DreamEngine version: {VERSION}\n")
    sys.stdout.flush()
    return 0


def add(a: int, b: int) -> None:
    """Print the sum of two integers."""
    print(f"Sum: {a + b}")


if __name__ == "__main__":
    raise SystemExit(main())