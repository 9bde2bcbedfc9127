"""Concrete birds.

`Sparrow` implements `Bird` and `Flyable`; `Penguin` only `Bird`.
"""

from __future__ import annotations

from rich.console import Console

from adapters.console import build_console, emit_line
from core.interfaces.bird import Bird, Flyable


class Sparrow(Bird, Flyable):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def eat(self) -> None:
        emit_line(self._console, "Sparrow pecks.")

    def fly(self) -> None:
        emit_line(self._console, "Sparrow flies.")


class Penguin(Bird):
    """Eats fish. Has no `fly` at all, not even one that raises."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def eat(self) -> None:
        emit_line(self._console, "Penguin eats fish.")
