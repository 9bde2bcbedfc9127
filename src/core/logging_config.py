"""Logging configuration.

Demo output goes to stdout through the console, so log records go to stderr.
Both streams can be redirected separately.
"""

from __future__ import annotations

import logging
import sys

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure the root logger from `AppSettings`.

    Calling it again replaces the handlers from the previous call.
    """

    settings = settings or AppSettings()
    logging.basicConfig(
        level=settings.log_level_number,
        format=settings.log_format,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", settings.log_level)
