import io
from datetime import datetime, timedelta

import pytest

from dreamengine.log import (
    ConsoleLogger,
    LogLevel,
    LogManager,
    Logger,
    log_debug,
    log_error,
    log_fatal,
    log_info,
    log_trace,
    log_warning,
)


class CaptureLogger(Logger):
    def __init__(self):
        self.records = []

    def log(self, level, msg):
        self.records.append((level, msg))


@pytest.fixture
def shared_capture():
    manager = LogManager.instance()
    old_logger, old_level = manager.logger, manager.level
    capture = CaptureLogger()
    manager.set_logger(capture)
    yield manager, capture
    manager.set_logger(old_logger)
    manager.set_level(old_level)


def test_levels_from_values():
    assert [LogLevel(value).name for value in range(6)] == [
        "TRACE",
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "FATAL",
    ]
    assert sorted(LogLevel, reverse=True)[0] is LogLevel.FATAL


@pytest.mark.parametrize(
    "level, tag",
    [
        (LogLevel.TRACE, "[Trace] "),
        (LogLevel.DEBUG, "[Debug] "),
        (LogLevel.INFO, "[Info] "),
        (LogLevel.ERROR, "[Error] "),
        (LogLevel.FATAL, "[Fatal] "),
    ],
)
def test_console_logger_tags(level, tag):
    stream = io.StringIO()
    ConsoleLogger(stream).log(level, "msg")
    assert tag + "msg" in stream.getvalue()


def test_manager_default_level_filters_debug():
    manager = LogManager()
    capture = CaptureLogger()
    manager.set_logger(capture)
    manager.log(LogLevel.DEBUG, "hidden")
    manager.log(LogLevel.INFO, "shown")
    assert capture.records == [(LogLevel.INFO, "shown")]


def test_manager_set_level_lowers_threshold():
    manager = LogManager()
    capture = CaptureLogger()
    manager.set_logger(capture)
    manager.set_level(LogLevel.DEBUG)
    manager.log(LogLevel.TRACE, "t")
    manager.log(LogLevel.DEBUG, "d")
    assert capture.records == [(LogLevel.DEBUG, "d")]


def test_manager_set_level_raises_threshold():
    manager = LogManager()
    capture = CaptureLogger()
    manager.set_logger(capture)
    manager.set_level(LogLevel.ERROR)
    manager.log(LogLevel.WARNING, "w")
    manager.log(LogLevel.FATAL, "f")
    assert capture.records == [(LogLevel.FATAL, "f")]


def test_manager_without_logger_drops_messages():
    manager = LogManager()
    manager.set_logger(None)
    manager.log(LogLevel.ERROR, "lost")
    capture = CaptureLogger()
    manager.set_logger(capture)
    manager.log(LogLevel.ERROR, "kept")
    assert capture.records == [(LogLevel.ERROR, "kept")]


def test_instance_is_shared(shared_capture):
    _, capture = shared_capture
    LogManager.instance().set_level(LogLevel.ERROR)
    log_warning("dropped")
    log_error("kept")
    assert capture.records == [(LogLevel.ERROR, "kept")]


def test_module_helpers_use_shared_manager(shared_capture):
    manager, capture = shared_capture
    manager.set_level(LogLevel.TRACE)
    log_trace("a")
    log_debug("b")
    log_info("c")
    log_warning("d")
    log_error("e")
    log_fatal("f")
    assert capture.records == [
        (LogLevel.TRACE, "a"),
        (LogLevel.DEBUG, "b"),
        (LogLevel.INFO, "c"),
        (LogLevel.WARNING, "d"),
        (LogLevel.ERROR, "e"),
        (LogLevel.FATAL, "f"),
    ]