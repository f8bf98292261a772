"""Line-oriented `key=value` formatter."""

from __future__ import annotations

import json
import string
from typing import TYPE_CHECKING, Any, Literal

from pydantic import Field

from .formatter import (
    FIELD_KEY_FUNC,
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    FieldMap,
    _FormatterModel,
    format_time,
    prefix_field_clashes,
    resolve,
)
from .level import Level

if TYPE_CHECKING:
    from .entry import Entry

_RESET = "\x1b[0m"

_BARE_CHARS = frozenset(string.ascii_letters + string.digits + "-._/@^+")

_LEVEL_COLORS: dict[Level, int] = {
    Level.TRACE: 37,
    Level.DEBUG: 37,
    Level.INFO: 36,
    Level.WARN: 33,
    Level.ERROR: 31,
    Level.FATAL: 31,
    Level.PANIC: 31,
}


class TextFormatter(_FormatterModel):
    """Render a record as `time=... level=... msg=... key=value` on one line.

    Reserved keys come first in a fixed order, then user fields: sorted by key
    by default, or in insertion order when `disable_sorting` is set.
    """

    kind: Literal["text"] = "text"

    # Color selection is up to the caller; no terminal detection happens here.
    force_colors: bool = False
    disable_colors: bool = False

    disable_timestamp: bool = False
    timestamp_format: str | None = None
    disable_sorting: bool = False
    quote_empty_fields: bool = False
    field_map: FieldMap = Field(default_factory=dict)

    @property
    def colored(self) -> bool:
        return self.force_colors and not self.disable_colors

    def format(self, entry: Entry) -> bytes:
        data = prefix_field_clashes(entry.data, self.field_map, entry.has_caller())

        keys = list(data)
        if not self.disable_sorting:
            keys.sort()

        tokens: list[str] = []
        if not self.disable_timestamp:
            tokens.append(self._token(resolve(self.field_map, FIELD_KEY_TIME), format_time(entry.time, self.timestamp_format)))

        level_text = str(entry.level)
        if self.colored:
            level_text = f"\x1b[{_LEVEL_COLORS[entry.level]}m{level_text}{_RESET}"
            tokens.append(f"{resolve(self.field_map, FIELD_KEY_LEVEL)}={level_text}")
        else:
            tokens.append(self._token(resolve(self.field_map, FIELD_KEY_LEVEL), level_text))

        tokens.append(self._token(resolve(self.field_map, FIELD_KEY_MSG), entry.message))
        if entry.has_caller():
            tokens.append(self._token(resolve(self.field_map, FIELD_KEY_FUNC), entry.caller.function))

        for key in keys:
            tokens.append(self._token(key, data[key]))

        return (" ".join(tokens) + "\n").encode("utf-8")

    def _token(self, key: str, value: Any) -> str:
        return f"{key}={self._render(value)}"

    def _render(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if value is None:
            return "<nil>"
        text = str(value)
        if self._needs_quoting(text):
            return json.dumps(text, ensure_ascii=False)
        return text

    def _needs_quoting(self, text: str) -> bool:
        # Anything beyond a conservative bare-word alphabet is quoted; this
        # covers whitespace, `=` and quotes.
        if not text:
            return self.quote_empty_fields
        return any(ch not in _BARE_CHARS for ch in text)
