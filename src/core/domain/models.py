"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Records are typed and documented with `Field`. They can be frozen so they
  never change after construction.

Note:
- These models describe *what* the data is. Rendering and persistence live in
  `adapters.billing`.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Invoice(BaseModel):
    """Billing record shared by the printer and the saver.

    It only holds data. Each operation on it lives in its own class.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Invoice number.",
    )
    amount: float = Field(
        ...,
        description="Invoiced amount.",
    )


class Circle(BaseModel):
    """Circle defined by its radius. Satisfies `core.interfaces.shape.Shape`."""

    model_config = ConfigDict(frozen=True)

    radius: float = Field(
        ...,
        description="Circle radius.",
    )

    def area(self) -> float:
        return math.pi * self.radius * self.radius


class Rectangle(BaseModel):
    """Rectangle defined by width and height. Satisfies `core.interfaces.shape.Shape`."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(
        ...,
        description="Length of the horizontal side.",
    )
    height: float = Field(
        ...,
        description="Length of the vertical side.",
    )

    def area(self) -> float:
        return self.width * self.height
