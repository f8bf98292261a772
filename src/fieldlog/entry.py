"""Log records and the per-level call surface.

An `Entry` is a record builder. Extending one (`with_field`, `with_fields`,
`with_error`, `with_time`) always returns a new Entry holding its own copy of
the fields, so a base entry can be shared between threads and reused for any
number of log calls without picking up anyone else's fields.

Message building follows two rules:

- `info(*args)` concatenates, adding a space only between two adjacent
  arguments that are both non-strings: `info("a", 10)` gives `"a10"`,
  `info(10, 10)` gives `"10 10"`.
- `infoln(*args)` always joins with a single space.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, TypeAlias

from .caller import Frame, get_caller
from .errors import PanicError, SinkWriteError
from .level import Level

if TYPE_CHECKING:
    from .logger import Logger

Fields: TypeAlias = dict[str, Any]

# Key used by `with_error`.
ERROR_KEY = "error"


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(tz=timezone.utc)


def sprint(args: tuple[Any, ...]) -> str:
    """Concatenate arguments, spacing only between two adjacent non-strings."""
    parts: list[str] = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(arg if is_str else str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintln(args: tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)


def sprintf(template: str, args: tuple[Any, ...]) -> str:
    if not args:
        return template
    return template % args


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001 - only used to build a fallback message
        return f"<unprintable {type(value).__name__}>"


def bad_message(template: str, args: tuple[Any, ...]) -> str:
    """Fallback message for arguments that could not be rendered.

    Keeps the template and marks the arguments, e.g.
    `bad_message("%d items", ("abc",))` gives `"%d items %!(BADARGS 'abc')"`.
    """
    marked = ", ".join(_safe_repr(arg) for arg in args)
    if not template:
        return f"%!(BADARGS {marked})"
    return f"{template} %!(BADARGS {marked})"


class LeveledLogging:
    """Per-level methods shared by `Logger` and `Entry`.

    Subclasses provide `log`, `logf`, `logln` and `_exit`; everything here
    funnels into those three.
    """

    def log(self, level: Level, *args: Any) -> None:
        raise NotImplementedError

    def logf(self, level: Level, template: str, *args: Any) -> None:
        raise NotImplementedError

    def logln(self, level: Level, *args: Any) -> None:
        raise NotImplementedError

    def _exit(self, code: int) -> None:
        raise NotImplementedError

    def trace(self, *args: Any) -> None:
        self.log(Level.TRACE, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def print(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def warning(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def fatal(self, *args: Any) -> None:
        """Log at FATAL, then exit with status 1."""
        self.log(Level.FATAL, *args)
        self._exit(1)

    def panic(self, *args: Any) -> None:
        """Log at PANIC, then raise `PanicError`."""
        self.log(Level.PANIC, *args)

    def tracef(self, template: str, *args: Any) -> None:
        self.logf(Level.TRACE, template, *args)

    def debugf(self, template: str, *args: Any) -> None:
        self.logf(Level.DEBUG, template, *args)

    def infof(self, template: str, *args: Any) -> None:
        self.logf(Level.INFO, template, *args)

    def printf(self, template: str, *args: Any) -> None:
        self.logf(Level.INFO, template, *args)

    def warnf(self, template: str, *args: Any) -> None:
        self.logf(Level.WARN, template, *args)

    def warningf(self, template: str, *args: Any) -> None:
        self.logf(Level.WARN, template, *args)

    def errorf(self, template: str, *args: Any) -> None:
        self.logf(Level.ERROR, template, *args)

    def fatalf(self, template: str, *args: Any) -> None:
        self.logf(Level.FATAL, template, *args)
        self._exit(1)

    def panicf(self, template: str, *args: Any) -> None:
        self.logf(Level.PANIC, template, *args)

    def traceln(self, *args: Any) -> None:
        self.logln(Level.TRACE, *args)

    def debugln(self, *args: Any) -> None:
        self.logln(Level.DEBUG, *args)

    def infoln(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def println(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def warnln(self, *args: Any) -> None:
        self.logln(Level.WARN, *args)

    def warningln(self, *args: Any) -> None:
        self.logln(Level.WARN, *args)

    def errorln(self, *args: Any) -> None:
        self.logln(Level.ERROR, *args)

    def fatalln(self, *args: Any) -> None:
        self.logln(Level.FATAL, *args)
        self._exit(1)

    def panicln(self, *args: Any) -> None:
        self.logln(Level.PANIC, *args)


class Entry(LeveledLogging):
    """A record in progress: the owning logger plus accumulated fields.

    Members:
    - Owning logger: `logger` (shared, never modified by the entry)
    - Fields: `data` (owned by this entry)
    - Severity / message / time: `level`, `message`, `time` (set on the
      record that is actually encoded)
    - Call site: `caller` (only when the logger reports callers)
    """

    def __init__(
        self,
        logger: Logger,
        data: Fields | None = None,
        *,
        time: datetime | None = None,
        level: Level = Level.INFO,
        message: str = "",
        caller: Frame | None = None,
    ) -> None:
        self.logger = logger
        self.data: Fields = dict(data) if data else {}
        self.time = time
        self.level = level
        self.message = message
        self.caller = caller

    def __repr__(self) -> str:
        return f"Entry(level={self.level!s}, message={self.message!r}, data={self.data!r})"

    def __str__(self) -> str:
        """Render the entry with the logger's formatter."""
        record = self if self.time is not None else self._record(self.level, self.message)
        return self.logger.formatter.format(record).decode("utf-8")

    def has_caller(self) -> bool:
        return self.caller is not None

    def with_field(self, key: str, value: Any) -> Entry:
        """Return a new entry with one more field."""
        return self.with_fields({key: value})

    def with_fields(self, fields: Fields) -> Entry:
        """Return a new entry with `fields` merged over this entry's fields."""
        data = dict(self.data)
        data.update(fields)
        return Entry(self.logger, data, time=self.time)

    def with_error(self, err: BaseException) -> Entry:
        return self.with_field(ERROR_KEY, err)

    def with_time(self, t: datetime) -> Entry:
        """Return a new entry whose records carry `t` instead of the current time."""
        return Entry(self.logger, self.data, time=t)

    def log(self, level: Level, *args: Any) -> None:
        if self.logger.is_level_enabled(level):
            self._log(level, self._message(sprint, "", args))

    def logf(self, level: Level, template: str, *args: Any) -> None:
        if self.logger.is_level_enabled(level):
            self._log(level, self._message(lambda a: sprintf(template, a), template, args))

    def logln(self, level: Level, *args: Any) -> None:
        if self.logger.is_level_enabled(level):
            self._log(level, self._message(sprintln, "", args))

    def _message(self, build: Callable[[tuple[Any, ...]], str], template: str, args: tuple[Any, ...]) -> str:
        """Build the message; a bad template or argument is reported, not raised."""
        try:
            return build(args)
        except Exception as exc:  # noqa: BLE001 - logging must not break the caller
            self.logger.report_error(SinkWriteError("Failed to format message", cause=exc))
            return bad_message(template, args)

    def _exit(self, code: int) -> None:
        self.logger.exit(code)

    def _record(self, level: Level, message: str) -> Entry:
        return Entry(
            self.logger,
            self.data,
            time=self.time if self.time is not None else utc_now(),
            level=level,
            message=message,
        )

    def _log(self, level: Level, message: str) -> None:
        logger = self.logger
        record = self._record(level, message)
        if logger.report_caller:
            record.caller = get_caller()

        for err in logger.hooks.fire(level, record):
            logger.report_error(err)

        try:
            data = logger.formatter.format(record)
        except Exception as exc:  # noqa: BLE001 - logging must not break the caller
            logger.report_error(SinkWriteError("Failed to format entry", cause=exc))
        else:
            logger.write(data)

        if level <= Level.PANIC:
            raise PanicError(record)
