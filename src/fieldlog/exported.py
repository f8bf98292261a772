"""Module-level API backed by a process-wide standard logger.

`set_level` / `get_level` here are the process-wide threshold accessors.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .entry import Entry, Fields
from .formatter import Formatter
from .hooks import Hook
from .level import Level
from .logger import Logger
from .sinks import Sink

std = Logger()


def standard_logger() -> Logger:
    return std


def set_output(out: Sink | None) -> None:
    std.set_output(out)


def set_formatter(formatter: Formatter) -> None:
    std.set_formatter(formatter)


def set_report_caller(enabled: bool) -> None:
    std.report_caller = enabled


def set_level(level: Level | str) -> None:
    std.set_level(level)


def get_level() -> Level:
    return std.get_level()


def is_level_enabled(level: Level) -> bool:
    return std.is_level_enabled(level)


def add_hook(hook: Hook) -> None:
    std.add_hook(hook)


def with_field(key: str, value: Any) -> Entry:
    return std.with_field(key, value)


def with_fields(fields: Fields) -> Entry:
    return std.with_fields(fields)


def with_error(err: BaseException) -> Entry:
    return std.with_error(err)


def with_time(t: datetime) -> Entry:
    return std.with_time(t)


def trace(*args: Any) -> None:
    std.trace(*args)


def debug(*args: Any) -> None:
    std.debug(*args)


def info(*args: Any) -> None:
    std.info(*args)


def warn(*args: Any) -> None:
    std.warn(*args)


def warning(*args: Any) -> None:
    std.warning(*args)


def error(*args: Any) -> None:
    std.error(*args)


def fatal(*args: Any) -> None:
    std.fatal(*args)


def panic(*args: Any) -> None:
    std.panic(*args)


def tracef(template: str, *args: Any) -> None:
    std.tracef(template, *args)


def debugf(template: str, *args: Any) -> None:
    std.debugf(template, *args)


def infof(template: str, *args: Any) -> None:
    std.infof(template, *args)


def warnf(template: str, *args: Any) -> None:
    std.warnf(template, *args)


def warningf(template: str, *args: Any) -> None:
    std.warningf(template, *args)


def errorf(template: str, *args: Any) -> None:
    std.errorf(template, *args)


def fatalf(template: str, *args: Any) -> None:
    std.fatalf(template, *args)


def panicf(template: str, *args: Any) -> None:
    std.panicf(template, *args)


def traceln(*args: Any) -> None:
    std.traceln(*args)


def debugln(*args: Any) -> None:
    std.debugln(*args)


def infoln(*args: Any) -> None:
    std.infoln(*args)


def warnln(*args: Any) -> None:
    std.warnln(*args)


def warningln(*args: Any) -> None:
    std.warningln(*args)


def errorln(*args: Any) -> None:
    std.errorln(*args)


def fatalln(*args: Any) -> None:
    std.fatalln(*args)


def panicln(*args: Any) -> None:
    std.panicln(*args)
