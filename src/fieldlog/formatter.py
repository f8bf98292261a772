"""Shared formatter contract and helpers.

Both formatters are small frozen pydantic models, so they double as the
`formatter` section of `LoggerConfig` (discriminated on `kind`).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .entry import Entry

FIELD_KEY_TIME = "time"
FIELD_KEY_LEVEL = "level"
FIELD_KEY_MSG = "msg"
FIELD_KEY_FUNC = "func"

# User keys that collide with a reserved output key are renamed with this prefix.
CLASH_PREFIX = "fields."

FieldMap: TypeAlias = dict[str, str]


class Formatter(Protocol):
    def format(self, entry: Entry) -> bytes:
        """Render one record, including its trailing newline."""


class _FormatterModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


def resolve(field_map: FieldMap, key: str) -> str:
    """Return the output name for reserved `key`."""
    return field_map.get(key, key)


def prefix_field_clashes(data: dict[str, Any], field_map: FieldMap, report_caller: bool) -> dict[str, Any]:
    """Return a copy of `data` with reserved output keys moved under `fields.`."""
    reserved = [FIELD_KEY_TIME, FIELD_KEY_MSG, FIELD_KEY_LEVEL]
    if report_caller:
        reserved.append(FIELD_KEY_FUNC)

    out = dict(data)
    for key in reserved:
        name = resolve(field_map, key)
        if name in out:
            out[CLASH_PREFIX + name] = out.pop(name)
    return out


def format_time(t: datetime, fmt: str | None) -> str:
    """Format a record time.

    With no explicit format the result is RFC 3339 at second precision, using
    `Z` for UTC, e.g. `2024-01-01T00:00:00Z`.
    """
    if fmt is not None:
        return t.strftime(fmt)
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    text = t.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
