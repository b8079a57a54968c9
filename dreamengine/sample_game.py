"""Sample game: starts the engine with a repeating one-second timer."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .engine import Engine
from .log import LogLevel, LogManager, log_info


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dreamengine-sample", description="Run the sample game."
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="stop the engine after this many seconds (default: run forever)",
    )
    args = parser.parse_args(argv)
    if args.duration is not None and args.duration <= 0.0:
        parser.error("--duration must be greater than zero")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the sample game and run its main loop."""
    args = _parse_args(argv)

    LogManager.instance().set_level(LogLevel.DEBUG)
    log_info("Dream Engine sample game started")

    engine = Engine()
    engine.initialize()

    timer_manager = engine.timer_manager()
    timer_manager.add_timer(
        1.0,
        lambda: log_info("Timer triggered every second"),
        True,
        True,
        True,
    )
    if args.duration is not None:
        timer_manager.add_timer(args.duration, engine.shutdown, loop=True)

    engine.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())