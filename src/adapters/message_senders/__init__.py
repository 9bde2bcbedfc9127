"""Delivery channels (concrete senders).

Each module implements `core.interfaces.messaging.MessageSender`.
"""

from adapters.message_senders.email import EmailSender
from adapters.message_senders.sms import SmsSender

__all__ = [
	"EmailSender",
	"SmsSender",
]
