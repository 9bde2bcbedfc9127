"""Channel: SMS (simulated)."""

from __future__ import annotations

from rich.console import Console

from adapters.console import build_console, emit_line
from core.interfaces.messaging import MessageSender


class SmsSender(MessageSender):
    channel = "SMS"

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def send(self, to: str, msg: str) -> None:
        emit_line(self._console, f"{self.channel} to {to}: {msg}")
