"""Hooks: observers fired synchronously before a record is encoded.

A hook declares the levels it cares about and is registered once per level.
Hooks run in registration order. One failing hook never stops its siblings or
the log call; its error is collected and handed back to the logger.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from .errors import HookError
from .level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from .entry import Entry


class Hook(Protocol):
    def levels(self) -> Iterable[Level]:
        """Return the levels this hook fires on."""

    def fire(self, entry: Entry) -> None:
        """Observe a record. Raising signals failure."""


class LevelHooks:
    """Per-level buckets of hooks, kept in registration order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hooks: dict[Level, list[Hook]] = {}

    def add(self, hook: Hook) -> None:
        """Register `hook` under every level it reports from `levels()`."""
        self.register(hook, *hook.levels())

    def register(self, hook: Hook, *levels: Level) -> None:
        """Register `hook` under the given levels.

        Duplicate registrations are kept; the hook then fires once per registration.
        """
        with self._lock:
            for level in levels:
                self._hooks.setdefault(Level(level), []).append(hook)

    def for_level(self, level: Level) -> list[Hook]:
        with self._lock:
            return list(self._hooks.get(level, ()))

    def fire(self, level: Level, entry: Entry) -> list[HookError]:
        """Fire every hook registered for `level` and return the failures."""
        errors: list[HookError] = []
        for hook in self.for_level(level):
            try:
                hook.fire(entry)
            except Exception as exc:  # noqa: BLE001 - reported by the logger
                errors.append(HookError(hook=hook, level=level, cause=exc))
        return errors

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._hooks.values())


class RecordingHook:
    """Hook that keeps every record it sees; meant for tests."""

    def __init__(self, levels: Iterable[Level] = ALL_LEVELS) -> None:
        self._levels = tuple(levels)
        self._lock = threading.Lock()
        self._entries: list[Entry] = []

    def levels(self) -> Iterable[Level]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> list[Entry]:
        """Return a point-in-time copy of the recorded entries."""
        with self._lock:
            return list(self._entries)

    def last_entry(self) -> Entry | None:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
