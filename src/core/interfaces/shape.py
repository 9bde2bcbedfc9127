"""Contract for shapes that have an area.

Why Protocol:
- Structural contract: pydantic models (`Circle`, `Rectangle`) satisfy it
  without inheriting from it.
- New shapes plug into `AreaCalculator` without changing it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """Anything that can report its own area."""

    def area(self) -> float:
        """Return the area of the shape."""

        ...
