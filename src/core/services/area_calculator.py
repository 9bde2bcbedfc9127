"""Area aggregation over any `Shape`."""

from __future__ import annotations

import logging
from typing import Iterable

from core.interfaces.shape import Shape

logger = logging.getLogger(__name__)


class AreaCalculator:
    """Sums the areas of shapes without knowing their concrete types.

    Adding a shape means writing a class with `area()`; this class is
    never edited for it.
    """

    def total_area(self, shapes: Iterable[Shape]) -> float:
        total = 0.0
        count = 0
        for shape in shapes:
            total += shape.area()
            count += 1
        logger.debug("Total area of %d shapes: %s", count, total)
        return total
