"""Leveled logging with a pluggable sink and a process-wide manager."""

from __future__ import annotations

import sys
import threading
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar, Optional, TextIO


class LogLevel(IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Logger(ABC):
    """A destination for log messages."""

    @abstractmethod
    def log(self, level: LogLevel, msg: str) -> None:
        """Write one message at the given level."""


class ConsoleLogger(Logger):
    """Writes timestamped, level-tagged lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def log(self, level: LogLevel, msg: str) -> None:
        stamp = time.strftime("[%Y-%m-%d %H:%M:%S] ", time.localtime())
        line = f"{stamp}[{LogLevel(level).label}] {msg}\n"
        with self._lock:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(line)
            stream.flush()


class LogManager:
    """Filters messages by level and forwards them to the current logger."""

    _instance: ClassVar[Optional["LogManager"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._logger: Optional[Logger] = ConsoleLogger()
        self._level = LogLevel.INFO
        self._lock = threading.RLock()

    @staticmethod
    def instance() -> "LogManager":
        """Return the shared manager, creating it on first use."""
        with LogManager._instance_lock:
            if LogManager._instance is None:
                LogManager._instance = LogManager()
            return LogManager._instance

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def logger(self) -> Optional[Logger]:
        return self._logger

    def set_logger(self, logger: Optional[Logger]) -> None:
        with self._lock:
            self._logger = logger

    def set_level(self, level: LogLevel) -> None:
        with self._lock:
            self._level = LogLevel(level)

    def log(self, level: LogLevel, msg: str) -> None:
        with self._lock:
            if level < self._level:
                return
            if self._logger is not None:
                self._logger.log(LogLevel(level), msg)


def log_trace(msg: str) -> None:
    LogManager.instance().log(LogLevel.TRACE, msg)


def log_debug(msg: str) -> None:
    LogManager.instance().log(LogLevel.DEBUG, msg)


def log_info(msg: str) -> None:
    LogManager.instance().log(LogLevel.INFO, msg)


def log_warning(msg: str) -> None:
    LogManager.instance().log(LogLevel.WARNING, msg)


def log_error(msg: str) -> None:
    LogManager.instance().log(LogLevel.ERROR, msg)


def log_fatal(msg: str) -> None:
    LogManager.instance().log(LogLevel.FATAL, msg)