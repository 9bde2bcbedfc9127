"""Office devices.

A simple printer is never forced to implement `scan`.
"""

from __future__ import annotations

from rich.console import Console

from adapters.console import build_console, emit_line
from core.interfaces.office import Printer, Scanner


class SimplePrinter(Printer):
    """Print-only device."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def print(self, doc: str) -> None:
        emit_line(self._console, f"Printing: {doc}")


class MultiFunctionPrinter(Printer, Scanner):
    """Multi-function printer (MFP): prints and scans."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def print(self, doc: str) -> None:
        emit_line(self._console, f"MFP print: {doc}")

    def scan(self) -> None:
        emit_line(self._console, "MFP scanning")
