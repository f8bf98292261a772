"""Severity levels and the race-free threshold holder."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidLevelError


class Level(IntEnum):
    """Ordered severities; smaller values are more severe.

    A record at level `x` passes a threshold `t` when `x <= t`, so setting the
    threshold to INFO lets PANIC through INFO pass and drops DEBUG and TRACE.
    """

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    def __str__(self) -> str:
        return _NAMES[self]

    def permits(self, threshold: Level) -> bool:
        """Return True if a record at this level passes `threshold`."""
        return self <= threshold

    @classmethod
    def parse(cls, text: str | Level) -> Level:
        return parse_level(text)


_NAMES: dict[Level, str] = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}

_BY_NAME: dict[str, Level] = {name: level for level, name in _NAMES.items()}
_BY_NAME["warn"] = Level.WARN

ALL_LEVELS: tuple[Level, ...] = tuple(Level)


def parse_level(text: str | Level) -> Level:
    """Parse a level name (case-insensitive; `warn` and `warning` both map to WARN).

    Raises:
    - `InvalidLevelError` when the text names no level.
    """
    if isinstance(text, Level):
        return text
    if isinstance(text, str):
        level = _BY_NAME.get(text.strip().lower())
        if level is not None:
            return level
    raise InvalidLevelError(text)


class AtomicLevel:
    """Threshold read on every log call and written by configuration calls.

    `load()` and `store()` are a single attribute read and a single rebind,
    both atomic in CPython, so readers never wait on a lock.
    """

    __slots__ = ("_value",)

    def __init__(self, level: Level = Level.INFO) -> None:
        self._value = parse_level(level)

    def load(self) -> Level:
        return self._value

    def store(self, level: Level | str) -> None:
        # Parse before publishing so a bad value never becomes visible.
        self._value = parse_level(level)

    def __repr__(self) -> str:
        return f"AtomicLevel({self._value!s})"
