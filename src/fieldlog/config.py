"""Configuration loading and validation.

This module is responsible for:

- Loading `.env` into the process environment (without overriding existing vars).
- Converting `FIELDLOG_*` environment variables into a typed `LoggerConfig`.
- Building a ready-to-use `Logger` from that configuration.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Annotated, Union

import dotenv
from pydantic import BaseModel, Field, field_validator

from .hooks import Hook
from .json_formatter import JSONFormatter
from .level import Level, parse_level
from .logger import ExitFunc, Logger
from .sinks import Sink
from .text_formatter import TextFormatter

FormatterConfig = Annotated[Union[TextFormatter, JSONFormatter], Field(discriminator="kind")]


def _get_env_bool(name: str, default: bool) -> bool:
    """Read a boolean env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    normalized = raw.strip().lower()
    if normalized in {"true", "1", "yes", "y", "on"}:
        return True
    if normalized in {"false", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean (true/false). Got: {raw!r}")


def _get_env_str(name: str, default: str | None) -> str | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


class LoggerConfig(BaseModel):
    """Top-level logger configuration."""

    level: Level = Field(default=Level.INFO, description="Minimum severity that is logged")
    report_caller: bool = Field(default=False, description="Add the calling function as `func`")
    formatter: FormatterConfig = Field(default_factory=TextFormatter, description="Output encoding")

    @field_validator("level", mode="before")
    def validate_level(cls, v: object) -> Level:
        """Accept level names as well as Level values."""
        if isinstance(v, Level):
            return v
        if isinstance(v, int):
            return Level(v)
        return parse_level(v)  # type: ignore[arg-type]


def load_config() -> LoggerConfig:
    """Load logger configuration from environment variables.

    Notes:
    - Calls `dotenv.load_dotenv()` so local `.env` values are visible to the process.
    - Raises `ValueError` (including `InvalidLevelError`) with an actionable
      message when a variable cannot be parsed.
    """
    dotenv.load_dotenv()

    kind = (_get_env_str("FIELDLOG_FORMAT", "text") or "text").lower()
    timestamp_format = _get_env_str("FIELDLOG_TIMESTAMP_FORMAT", None)
    formatter: TextFormatter | JSONFormatter
    if kind == "text":
        formatter = TextFormatter(
            timestamp_format=timestamp_format,
            force_colors=_get_env_bool("FIELDLOG_FORCE_COLORS", False),
            disable_sorting=_get_env_bool("FIELDLOG_DISABLE_SORTING", False),
        )
    elif kind == "json":
        formatter = JSONFormatter(timestamp_format=timestamp_format)
    else:
        raise ValueError(f"FIELDLOG_FORMAT must be 'text' or 'json'. Got: {kind!r}")

    return LoggerConfig(
        level=parse_level(_get_env_str("FIELDLOG_LEVEL", "info") or "info"),
        report_caller=_get_env_bool("FIELDLOG_REPORT_CALLER", False),
        formatter=formatter,
    )


def new_logger(
    config: LoggerConfig | None = None,
    *,
    out: Sink | None = None,
    hooks: Iterable[Hook] = (),
    exit_func: ExitFunc | None = None,
) -> Logger:
    """Build a Logger from `config` (loaded from the environment when omitted)."""
    if config is None:
        config = load_config()
    logger = Logger(
        out=out,
        formatter=config.formatter,
        level=config.level,
        report_caller=config.report_caller,
        exit_func=exit_func,
    )
    for hook in hooks:
        logger.add_hook(hook)
    return logger
