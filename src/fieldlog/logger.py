"""The Logger: output, formatter, hooks and threshold in one place."""

from __future__ import annotations

import io
import sys
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any

from .entry import Entry, Fields, LeveledLogging, utc_now
from .errors import HookError, SinkWriteError
from .formatter import Formatter
from .hooks import Hook, LevelHooks
from .level import AtomicLevel, Level
from .sinks import Sink
from .text_formatter import TextFormatter

ExitFunc = Callable[[int], Any]
ErrorReporter = Callable[[Exception], None]


def _print_to_stderr(err: Exception) -> None:
    """Default error reporter."""
    print(err, file=sys.stderr)


class Logger(LeveledLogging):
    """Structured logger.

    Members:
    - Output: `out` (any `Sink`; None means the current `sys.stderr`)
    - Encoding: `formatter` (`TextFormatter` by default)
    - Hooks: `hooks` (`LevelHooks`)
    - Threshold: `level` (atomic; never takes the write lock)
    - Call-site capture: `report_caller`
    - Termination for FATAL: `exit_func` (`sys.exit` by default)
    - Diagnostics for hook/sink failures: `error_reporter`

    Calls such as `logger.with_field(...)` return a new `Entry`; the logger
    itself never accumulates fields.
    """

    def __init__(
        self,
        *,
        out: Sink | None = None,
        formatter: Formatter | None = None,
        hooks: LevelHooks | None = None,
        level: Level | str = Level.INFO,
        report_caller: bool = False,
        exit_func: ExitFunc | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        self.out = out
        self.formatter: Formatter = formatter if formatter is not None else TextFormatter()
        self.hooks = hooks if hooks is not None else LevelHooks()
        self.report_caller = report_caller
        self.exit_func: ExitFunc = exit_func if exit_func is not None else sys.exit
        self.error_reporter: ErrorReporter = error_reporter if error_reporter is not None else _print_to_stderr

        self._level = AtomicLevel(level)
        self._mu = threading.Lock()
        self._hooks_lock = threading.Lock()
        self._exit_lock = threading.Lock()
        self._exit_handlers: list[Callable[[], Any]] = []

        # Degradation tracking: counts and time window.
        self._stats_lock = threading.Lock()
        self._write_failures = 0
        self._hook_failures = 0
        self._first_failure_at: datetime | None = None
        self._last_failure_at: datetime | None = None

    @property
    def level(self) -> Level:
        return self._level.load()

    @level.setter
    def level(self, level: Level | str) -> None:
        self._level.store(level)

    def get_level(self) -> Level:
        return self._level.load()

    def set_level(self, level: Level | str) -> None:
        self._level.store(level)

    def is_level_enabled(self, level: Level) -> bool:
        return level <= self._level.load()

    def add_hook(self, hook: Hook) -> None:
        self.hooks.add(hook)

    def replace_hooks(self, hooks: LevelHooks) -> LevelHooks:
        """Install a new set of hooks and return the previous one."""
        with self._hooks_lock:
            old, self.hooks = self.hooks, hooks
        return old

    def set_output(self, out: Sink | None) -> None:
        """Swap the sink; waits for any write in progress."""
        with self._mu:
            self.out = out

    def set_formatter(self, formatter: Formatter) -> None:
        with self._mu:
            self.formatter = formatter

    def new_entry(self) -> Entry:
        return Entry(self)

    def with_field(self, key: str, value: Any) -> Entry:
        return self.new_entry().with_field(key, value)

    def with_fields(self, fields: Fields) -> Entry:
        return self.new_entry().with_fields(fields)

    def with_error(self, err: BaseException) -> Entry:
        return self.new_entry().with_error(err)

    def with_time(self, t: datetime) -> Entry:
        return self.new_entry().with_time(t)

    def log(self, level: Level, *args: Any) -> None:
        self.new_entry().log(level, *args)

    def logf(self, level: Level, template: str, *args: Any) -> None:
        self.new_entry().logf(level, template, *args)

    def logln(self, level: Level, *args: Any) -> None:
        self.new_entry().logln(level, *args)

    def _exit(self, code: int) -> None:
        self.exit(code)

    def register_exit_handler(self, handler: Callable[[], Any]) -> None:
        """Run `handler` before the process exits on a FATAL call."""
        with self._exit_lock:
            self._exit_handlers.append(handler)

    def exit(self, code: int) -> None:
        """Run exit handlers in registration order, then `exit_func(code)`."""
        with self._exit_lock:
            handlers = list(self._exit_handlers)
        for handler in handlers:
            try:
                handler()
            except Exception as exc:  # noqa: BLE001 - every handler gets its turn
                self.report_error(exc)
        self.exit_func(code)

    def write(self, data: bytes) -> None:
        """Write one encoded record, serialized against all other writers."""
        try:
            with self._mu:
                out = self.out if self.out is not None else sys.stderr
                if isinstance(out, io.TextIOBase):
                    out.write(data.decode("utf-8"))
                else:
                    out.write(data)
        except Exception as exc:  # noqa: BLE001 - logging must not break the caller
            self.report_error(SinkWriteError("Failed to write to log", cause=exc))

    def report_error(self, err: Exception) -> None:
        """Count a failure and hand it to the error reporter."""
        now = utc_now()
        with self._stats_lock:
            if isinstance(err, HookError):
                self._hook_failures += 1
            else:
                self._write_failures += 1
            self._first_failure_at = self._first_failure_at or now
            self._last_failure_at = now
        try:
            self.error_reporter(err)
        except Exception:  # noqa: BLE001 - nowhere left to report to
            pass

    def degraded_status(self) -> dict[str, Any]:
        """Return a minimal degraded-status snapshot."""
        with self._stats_lock:
            return {
                "write_failures": self._write_failures,
                "hook_failures": self._hook_failures,
                "first_failure_at": self._first_failure_at,
                "last_failure_at": self._last_failure_at,
            }
