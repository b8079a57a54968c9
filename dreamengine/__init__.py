"""A small game engine core: logging, timers, allocators, a main loop and two commands."""

__version__ = "0.1.0"
__all__ = ["__version__"]