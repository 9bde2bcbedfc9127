"""Message delivery contract.

Rules:
- `send` delivers `msg` to `to` on one channel (email, SMS, ...).
- The recipient and message are passed through exactly as given.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSender(Protocol):
    """Minimum contract for a delivery channel."""

    def send(self, to: str, msg: str) -> None:
        """Deliver `msg` to the recipient `to`."""

        ...
