import typing

import pytest

from adapters.birds import Penguin, Sparrow
from core.errors import CapabilityError, SolidDemoError
from core.interfaces.bird import Bird, Flyable
from core.services.flight import let_it_fly


def test_sparrow_flies(console, lines):
    let_it_fly(Sparrow(console))

    assert lines() == ["Sparrow flies."]


def test_sparrow_eats(console, lines):
    Sparrow(console).eat()

    assert lines() == ["Sparrow pecks."]


def test_penguin_eats_fish(console, lines):
    Penguin(console).eat()

    assert lines() == ["Penguin eats fish."]


def test_capabilities(console):
    sparrow = Sparrow(console)
    penguin = Penguin(console)

    assert isinstance(sparrow, Bird) and isinstance(sparrow, Flyable)
    assert isinstance(penguin, Bird)
    assert not isinstance(penguin, Flyable)
    assert not hasattr(penguin, "fly")


def test_let_it_fly_is_typed_against_flyable_only():
    hints = typing.get_type_hints(let_it_fly)

    assert hints["flyer"] is Flyable


def test_let_it_fly_rejects_a_penguin(console, lines):
    with pytest.raises(CapabilityError) as excinfo:
        let_it_fly(Penguin(console))  # type: ignore[arg-type]

    assert excinfo.value.capability is Flyable
    assert "Penguin does not implement Flyable" in str(excinfo.value)
    assert isinstance(excinfo.value, (SolidDemoError, TypeError))
    assert lines() == []
