"""Notification service.

Depends only on `MessageSender`. The channel is injected at construction;
switching from email to SMS means passing a different sender, never editing
this module.
"""

from __future__ import annotations

import logging

from core.errors import CapabilityError
from core.interfaces.messaging import MessageSender

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, sender: MessageSender) -> None:
        if not isinstance(sender, MessageSender):
            raise CapabilityError(sender, MessageSender)
        self._sender = sender

    @property
    def sender(self) -> MessageSender:
        return self._sender

    def notify(self, user: str, message: str) -> None:
        """Forward `user` and `message` to the injected sender unchanged."""

        logger.debug("Notifying %s via %s", user, type(self._sender).__name__)
        self._sender.send(user, message)
