"""Operations for things that can fly."""

from __future__ import annotations

from core.errors import CapabilityError
from core.interfaces.bird import Flyable


def let_it_fly(flyer: Flyable) -> None:
    """Make `flyer` fly.

    Typed against `Flyable` only, so a type checker rejects an eat-only bird
    before the program runs. The isinstance check covers untyped callers.
    """

    if not isinstance(flyer, Flyable):
        raise CapabilityError(flyer, Flyable)
    flyer.fly()
