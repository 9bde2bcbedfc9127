"""Bird capability contracts.

Eating and flying are separate capabilities. Birds that cannot fly never
promise to, so every `Flyable` can stand in for any other.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Bird(Protocol):
    """A bird that can eat."""

    def eat(self) -> None:
        ...


@runtime_checkable
class Flyable(Protocol):
    """Something that can actually fly."""

    def fly(self) -> None:
        ...
