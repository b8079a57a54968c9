"""Countdown timers driven by frame deltas, and a manager that owns them."""

from __future__ import annotations

from typing import Callable, List, Optional

from .log import log_trace


class Timer:
    """Calls a callback after an interval, once or repeatedly."""

    def __init__(
        self,
        interval: float,
        callback: Optional[Callable[[], None]],
        loop: bool = False,
        run_on_first_tick: bool = True,
    ) -> None:
        self._interval = interval
        self._time_left = interval
        self._loop = loop
        self._paused = False
        self._running = False
        self._run_on_first_tick = run_on_first_tick
        self._first_tick = True
        self._callback = callback

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def time_left(self) -> float:
        return self._time_left

    def start(self) -> None:
        self._time_left = self._interval
        self._paused = False
        self._running = True
        self._first_tick = True

    def stop(self) -> None:
        self._running = False
        self._time_left = self._interval
        self._paused = False
        self._first_tick = True

    def pause(self) -> None:
        if self._running and not self._paused:
            self._paused = True

    def resume(self) -> None:
        if self._running and self._paused:
            self._paused = False

    def reset(self) -> None:
        self.start()

    def is_paused(self) -> bool:
        return self._paused

    def is_running(self) -> bool:
        return self._running

    def is_finished(self) -> bool:
        return not self._running or not self._loop

    def update(self, delta_time: float) -> None:
        """Advance the timer by delta_time seconds, firing the callback when due."""
        log_trace("Updating Timer")
        if not self._running or self._paused:
            return

        if self._first_tick and self._run_on_first_tick:
            self._first_tick = False
            if self._callback is not None:
                self._callback()
            if not self._loop:
                self._time_left = 0.0
                return

        self._time_left -= delta_time
        if self._time_left <= 0.0:
            self._callback()
            if self._loop:
                self._time_left += self._interval
            else:
                self._time_left = 0.0


class TimerManager:
    """Owns timers, updates them each frame and drops finished ones."""

    def __init__(self) -> None:
        self._timers: List[Timer] = []

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self):
        return iter(list(self._timers))

    def add_timer(
        self,
        interval: float,
        callback: Callable[[], None],
        loop: bool = False,
        run_on_first_tick: bool = False,
        start_immediately: bool = True,
    ) -> Timer:
        if interval <= 0.0:
            raise ValueError("Interval must be greater than zero.")
        if callback is None or not callable(callback):
            raise ValueError("Callback function cannot be null.")

        timer = Timer(interval, callback, loop, run_on_first_tick)
        self._timers.append(timer)
        if start_immediately:
            timer.start()
        else:
            timer.reset()
        return timer

    def remove_timer(self, timer: Timer) -> None:
        remaining = [t for t in self._timers if t is not timer]
        if len(remaining) == len(self._timers):
            raise ValueError("Timer not found in TimerManager.")
        self._timers = remaining

    def clear_timers(self) -> None:
        self._timers.clear()

    def update(self, delta_time: float) -> None:
        log_trace(
            f"TimerManager::Update, timers count: {len(self._timers)}, "
            f"deltaTime: {delta_time:f}"
        )
        for timer in tuple(self._timers):
            timer.update(delta_time)
            if timer.is_finished():
                self._timers = [t for t in self._timers if t is not timer]