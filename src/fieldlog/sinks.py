"""Output sinks.

A logger writes each encoded record with a single `write(bytes)` call. It does
no buffering or rotation of its own; that belongs to the sink.
"""

from __future__ import annotations

import threading
from typing import Any, Protocol


class Sink(Protocol):
    """A byte sink. Text streams such as `sys.stderr` are accepted as well."""

    def write(self, data: bytes) -> Any:
        """Accept one encoded record."""


class InMemorySink:
    """In-memory sink for tests and local debugging."""

    def __init__(self) -> None:
        """Create an empty in-memory sink."""
        self._lock = threading.Lock()
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        """Append bytes to the buffer (thread-safe)."""
        with self._lock:
            self._buffer.extend(data)
        return len(data)

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        with self._lock:
            return bytes(self._buffer)

    def lines(self) -> list[str]:
        """Return the decoded records written so far, one per line."""
        return self.getvalue().decode("utf-8").splitlines()

    def reset(self) -> None:
        with self._lock:
            self._buffer.clear()
