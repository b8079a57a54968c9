"""Monotonic application clock."""

from __future__ import annotations

import functools
import time


@functools.lru_cache(maxsize=None)
def _start() -> float:
    return time.monotonic()


def current_time() -> float:
    """Seconds elapsed since the clock was first read."""
    start = _start()
    return time.monotonic() - start