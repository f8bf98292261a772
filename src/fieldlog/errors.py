"""Exception types raised or reported by fieldlog.

Only `InvalidLevelError` and `PanicError` ever reach the caller. Hook and sink
failures are handed to the logger's error reporter instead, so a log call never
breaks the code that made it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entry import Entry
    from .level import Level


class FieldlogError(Exception):
    """Base class for all fieldlog errors."""


class InvalidLevelError(FieldlogError, ValueError):
    """Severity text that does not name a known level."""

    def __init__(self, text: Any):
        """Create an error carrying the offending input."""
        self.text = text
        super().__init__(f'not a valid fieldlog Level: "{text}"')


class HookError(FieldlogError):
    """A registered hook raised while firing."""

    def __init__(self, *, hook: Any, level: Level, cause: BaseException):
        self.hook = hook
        self.level = level
        super().__init__(f"Failed to fire hook: {cause}")
        self.__cause__ = cause


class SinkWriteError(FieldlogError):
    """Encoding or writing a record to the output failed."""

    def __init__(self, message: str, *, cause: BaseException):
        super().__init__(f"{message}, {cause}")
        self.__cause__ = cause


class PanicError(FieldlogError):
    """Raised after a PANIC record has been written."""

    def __init__(self, entry: Entry):
        self.entry = entry
        super().__init__(entry.message)
