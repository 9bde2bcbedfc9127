"""Errors raised by the core.

Demo operations cannot fail on well-formed input. The only error condition is
a value that is missing a capability it was asked to provide.
"""

from __future__ import annotations


class SolidDemoError(Exception):
    """Base error for the demo."""


class CapabilityError(SolidDemoError, TypeError):
    """A value does not implement the capability required by its caller."""

    def __init__(self, value: object, capability: type) -> None:
        self.value = value
        self.capability = capability
        super().__init__(
            f"{type(value).__name__} does not implement {capability.__name__}"
        )
