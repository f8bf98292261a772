"""Structured, leveled logging.

Callers attach key/value fields to an `Entry`, log it at a severity, and the
record is filtered against the logger's threshold, passed through hooks,
encoded by a formatter (text or JSON) and written to the output:

    log = Logger(formatter=JSONFormatter())
    log.with_field("user", "ada").info("signed in")
"""

from .caller import Frame
from .config import LoggerConfig, load_config, new_logger
from .entry import ERROR_KEY, Entry, Fields
from .errors import FieldlogError, HookError, InvalidLevelError, PanicError, SinkWriteError
from .exported import (
    add_hook,
    debug,
    debugf,
    debugln,
    error,
    errorf,
    errorln,
    fatal,
    fatalf,
    fatalln,
    get_level,
    info,
    infof,
    infoln,
    is_level_enabled,
    panic,
    panicf,
    panicln,
    set_formatter,
    set_level,
    set_output,
    set_report_caller,
    standard_logger,
    trace,
    tracef,
    traceln,
    warn,
    warnf,
    warning,
    warningf,
    warningln,
    warnln,
    with_error,
    with_field,
    with_fields,
    with_time,
)
from .formatter import Formatter
from .hooks import Hook, LevelHooks, RecordingHook
from .json_formatter import JSONFormatter
from .level import ALL_LEVELS, AtomicLevel, Level, parse_level
from .logger import Logger
from .sinks import InMemorySink, Sink
from .text_formatter import TextFormatter

__all__ = [
    "ALL_LEVELS",
    "ERROR_KEY",
    "AtomicLevel",
    "Entry",
    "FieldlogError",
    "Fields",
    "Formatter",
    "Frame",
    "Hook",
    "HookError",
    "InMemorySink",
    "InvalidLevelError",
    "JSONFormatter",
    "Level",
    "LevelHooks",
    "Logger",
    "LoggerConfig",
    "PanicError",
    "RecordingHook",
    "Sink",
    "SinkWriteError",
    "TextFormatter",
    "add_hook",
    "debug",
    "debugf",
    "debugln",
    "error",
    "errorf",
    "errorln",
    "fatal",
    "fatalf",
    "fatalln",
    "get_level",
    "info",
    "infof",
    "infoln",
    "is_level_enabled",
    "load_config",
    "new_logger",
    "panic",
    "panicf",
    "panicln",
    "parse_level",
    "set_formatter",
    "set_level",
    "set_output",
    "set_report_caller",
    "standard_logger",
    "trace",
    "tracef",
    "traceln",
    "warn",
    "warnf",
    "warning",
    "warningf",
    "warningln",
    "warnln",
    "with_error",
    "with_field",
    "with_fields",
    "with_time",
]
