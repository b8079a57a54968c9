# dreamengine

A small game engine core. It has four parts:

- **Logging.** `dreamengine.log` provides a process-wide `LogManager`. The manager filters messages by `LogLevel` and writes them through a `ConsoleLogger`, which adds a timestamp.
- **Timers.** `dreamengine.timer` provides `Timer` objects and a `TimerManager`. The manager advances all of its timers by each frame's elapsed time.
- **Allocators.** `dreamengine.alloc` provides `MallocAllocator` and `ArenaAllocator`. Both hand out blocks as writable `memoryview`s.
- **Engine.** `dreamengine.engine.Engine` sets up the components and runs the main loop.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Logging

```python
from dreamengine.log import LogLevel, LogManager, log_info, log_debug

LogManager.instance().set_level(LogLevel.DEBUG)
log_info("Game started")
log_debug("Loading assets")
```

The levels are `TRACE`, `DEBUG`, `INFO`, `WARNING`, `ERROR` and `FATAL`. The default level is `INFO`. Messages below the current level are dropped. The shortcut functions are `log_trace`, `log_debug`, `log_info`, `log_warning`, `log_error` and `log_fatal`. Each kept message is printed in this form:

```
[2025-05-27 12:00:00] [Info] Game started
```

`ConsoleLogger` writes to standard output by default. You can pass it another text stream instead: `ConsoleLogger(stream)`. To send output somewhere else entirely, pass your own `Logger` subclass to `LogManager.set_logger`. Passing `None` there silences all output.

## Timers

```python
from dreamengine.timer import TimerManager

timers = TimerManager()
timer = timers.add_timer(1.0, lambda: print("tick"), loop=True)

timers.update(0.5)   # nothing yet
timers.update(0.5)   # prints "tick"
```

The signature is `add_timer(interval, callback, loop=False, run_on_first_tick=False, start_immediately=True)`. It behaves as follows:

- It raises `ValueError` if the interval is not positive or if the callback is missing or not callable.
- When `run_on_first_tick` is true, the callback fires on the timer's first update.
- A looping timer keeps firing, once each time its interval runs out.
- A timer counts as finished once it is stopped or when it does not loop. `TimerManager.update` drops finished timers right after updating them. A one-shot timer therefore gets exactly one update. It fires only if that update's delta reaches its interval, or if `run_on_first_tick` is set.
- `remove_timer` raises `ValueError` if the timer does not belong to the manager.
- `clear_timers()` removes every timer.
- `len(manager)` gives the number of timers, and iterating over the manager yields them.

Individual timers can be controlled with `pause()`, `resume()`, `stop()`, `start()` and `reset()`. You can query them with `is_paused()`, `is_running()` and `is_finished()`, and read their `interval` and `time_left`.

## Allocators

```python
from dreamengine.alloc import ArenaAllocator

arena = ArenaAllocator(1024)
block = arena.allocate(64, 16)
block[0] = 255
arena.reset()   # every block handed out so far is released
```

`ArenaAllocator` is a linear allocator over a single fixed buffer. It behaves as follows:

- Block offsets are aligned to the requested alignment. The default is 16, and any alignment must be a positive power of two, otherwise `ValueError` is raised.
- `allocate` raises `MemoryError` when the buffer is exhausted.
- `deallocate` does nothing; only `reset()` frees space.
- `used` gives the number of bytes consumed so far, and `total_size` gives the buffer size.

`MallocAllocator` returns an independent block for each request. Its `deallocate` releases the view.

## Engine

```python
from dreamengine.engine import Engine

engine = Engine()
engine.initialize()
engine.timer_manager().add_timer(1.0, engine.shutdown, loop=True)
engine.run()
```

The engine behaves as follows:

- `run()` keeps updating the timer manager with the elapsed time, measured by `dreamengine.timeutils.current_time()`, until `shutdown()` is called.
- Calling `run()` before `initialize()` shuts the engine down and raises `RuntimeError`.
- `timer_manager()` raises `RuntimeError` when no manager exists, that is before initialization or after shutdown.
- A second call to `initialize()` only logs a warning.

The example above uses a looping timer because of how timers finish. A one-shot timer is dropped after the first frame, long before one second has passed.

## Commands

The sample game starts the engine at debug log level, with a timer that logs a message every second. By default it runs until interrupted. Use `--duration SECONDS` to shut the engine down after that many seconds:

```
dreamengine-sample
dreamengine-sample --duration 5
```

The editor prints the engine version and ignores any arguments:

```
dreamengine-editor
```

`dreamengine.editor.add(a, b)` prints `Sum: <a + b>`.

## What it does not do

There is no rendering, windowing, input, audio or scene handling. The main loop only advances timers, and it spins without sleeping between frames. The editor command does nothing beyond printing the version.

## Running the tests

```
pytest
```