"""Invoice operations.

Each class has a single reason to change: `InvoicePrinter` changes when the
rendering changes, `InvoiceSaver` when persistence does.
"""

from __future__ import annotations

import logging

from rich.console import Console

from adapters.console import build_console, emit_line
from core.domain.models import Invoice

logger = logging.getLogger(__name__)


class InvoicePrinter:
    """Renders an invoice as a human-readable line."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def print(self, invoice: Invoice) -> None:
        emit_line(self._console, f"Invoice #{invoice.id} amount={invoice.amount}")


class InvoiceSaver:
    """Simulated persistence: only confirms, performs no I/O."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def save(self, invoice: Invoice) -> None:
        logger.debug("Saving invoice %s", invoice.id)
        emit_line(self._console, f"Saved invoice {invoice.id}")
