"""One-JSON-object-per-line formatter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field

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

if TYPE_CHECKING:
    from .entry import Entry


def _json_default(value: Any) -> Any:
    """Fallback encoder for values `json` does not know about."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


class JSONFormatter(_FormatterModel):
    """Render a record as a single compact JSON object.

    Key order is `time`, `level`, `msg`, `func`, then user fields in insertion
    order, so identical histories always produce identical bytes. Numbers stay
    numbers; exceptions are written as their text. NaN and infinities are
    refused with `ValueError` rather than written as non-JSON tokens.
    """

    kind: Literal["json"] = "json"

    disable_timestamp: bool = False
    timestamp_format: str | None = None
    field_map: FieldMap = Field(default_factory=dict)

    # When set, user fields are nested under this key.
    data_key: str | None = None
    pretty_print: bool = False

    def format(self, entry: Entry) -> bytes:
        fields: dict[str, Any] = {}
        for key, value in entry.data.items():
            if isinstance(value, BaseException):
                value = str(value)
            fields[key] = value

        if self.data_key:
            fields = {self.data_key: fields} if fields else {}
        user = prefix_field_clashes(fields, self.field_map, entry.has_caller())

        record: dict[str, Any] = {}
        if not self.disable_timestamp:
            record[resolve(self.field_map, FIELD_KEY_TIME)] = format_time(entry.time, self.timestamp_format)
        record[resolve(self.field_map, FIELD_KEY_LEVEL)] = str(entry.level)
        record[resolve(self.field_map, FIELD_KEY_MSG)] = entry.message
        if entry.has_caller():
            record[resolve(self.field_map, FIELD_KEY_FUNC)] = entry.caller.function
        record.update(user)

        if self.pretty_print:
            text = json.dumps(record, indent=2, ensure_ascii=False, allow_nan=False, default=_json_default)
        else:
            text = json.dumps(
                record, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=_json_default
            )
        return (text + "\n").encode("utf-8")
