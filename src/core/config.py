"""Core configuration.

Why it lives here:
- Environment variables are read once (pydantic-settings), outside the CLI.
- Configuration only affects diagnostics. The demo values and the lines
  written to stdout are fixed.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class AppSettings(BaseSettings):
    """Central application settings.

    Variables use the `SOLID_DEMO_` prefix, e.g. `SOLID_DEMO_LOG_LEVEL=debug`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_DEMO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root logger level (stderr).",
    )
    log_format: str = Field(
        default="%(asctime)s %(name)s %(levelname)s: %(message)s",
        min_length=1,
        description="Format string for log records.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(_LEVEL_NAMES)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        record = logging.LogRecord("solid_demo", logging.INFO, __file__, 0, "sample", None, None)
        try:
            logging.Formatter(value).format(record)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid log format {value!r}: {exc}") from exc
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
