"""Office device contracts.

Printing and scanning are separate contracts. A device implements only what
it supports, and a client depends only on the contract it uses.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Printer(Protocol):
    def print(self, doc: str) -> None:
        """Print a document."""

        ...


@runtime_checkable
class Scanner(Protocol):
    def scan(self) -> None:
        """Scan whatever is on the glass."""

        ...
