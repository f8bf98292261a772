from __future__ import annotations

import json
import shlex
from collections.abc import Callable
from typing import Any

import pytest

from fieldlog import InMemorySink, JSONFormatter, Logger, TextFormatter


def parse_text_line(line: str) -> dict[str, str]:
    """Split a text record into its `key=value` pairs (quoted values unquoted)."""
    fields: dict[str, str] = {}
    for token in shlex.split(line):
        if "=" not in token:
            continue
        key, _, value = token.partition("=")
        fields[key] = value
    return fields


@pytest.fixture
def parse_text() -> Callable[[str], dict[str, str]]:
    return parse_text_line


@pytest.fixture
def sink() -> InMemorySink:
    return InMemorySink()


@pytest.fixture
def exits() -> list[int]:
    """Exit codes passed to the logger's exit function."""
    return []


@pytest.fixture
def reported() -> list[Exception]:
    """Errors handed to the logger's error reporter."""
    return []


@pytest.fixture
def json_logger(sink: InMemorySink, exits: list[int], reported: list[Exception]) -> Logger:
    return Logger(out=sink, formatter=JSONFormatter(), exit_func=exits.append, error_reporter=reported.append)


@pytest.fixture
def text_logger(sink: InMemorySink, exits: list[int], reported: list[Exception]) -> Logger:
    return Logger(
        out=sink,
        formatter=TextFormatter(disable_colors=True),
        exit_func=exits.append,
        error_reporter=reported.append,
    )


@pytest.fixture
def log_and_assert_json() -> Callable[[Callable[[Logger], None], Callable[[dict[str, Any]], None]], None]:
    """Log through a fresh JSON logger and hand the decoded record to `assertions`."""

    def _run(log: Callable[[Logger], None], assertions: Callable[[dict[str, Any]], None]) -> None:
        sink = InMemorySink()
        logger = Logger(out=sink, formatter=JSONFormatter())
        log(logger)
        assertions(json.loads(sink.getvalue()))

    return _run


@pytest.fixture
def log_and_assert_text() -> Callable[[Callable[[Logger], None], Callable[[dict[str, str]], None]], None]:
    """Log through a fresh text logger and hand the parsed key/values to `assertions`."""

    def _run(log: Callable[[Logger], None], assertions: Callable[[dict[str, str]], None]) -> None:
        sink = InMemorySink()
        logger = Logger(out=sink, formatter=TextFormatter(disable_colors=True))
        log(logger)
        fields: dict[str, str] = {}
        for line in sink.lines():
            fields.update(parse_text_line(line))
        assertions(fields)

    return _run
