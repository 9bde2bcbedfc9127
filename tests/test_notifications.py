from unittest.mock import Mock

import pytest

from adapters.message_senders import EmailSender, SmsSender
from core.errors import CapabilityError
from core.interfaces.messaging import MessageSender
from core.services.notification_service import NotificationService


def test_email_channel(console, lines):
    NotificationService(EmailSender(console)).notify("alice@example.com", "Welcome!")

    assert lines() == ["Email to alice@example.com: Welcome!"]


def test_sms_channel(console, lines):
    NotificationService(SmsSender(console)).notify("+911234567890", "OTP: 123456")

    assert lines() == ["SMS to +911234567890: OTP: 123456"]


@pytest.mark.parametrize(
    "user, message",
    [
        ("alice@example.com", "Welcome!"),
        ("+911234567890", "OTP: 123456"),
        ("bob", ":smile: [red]x[/red]"),
    ],
)
def test_swapping_channel_changes_only_the_prefix(output, console, user, message):
    NotificationService(EmailSender(console)).notify(user, message)
    email_line = output.getvalue().splitlines()[-1]
    NotificationService(SmsSender(console)).notify(user, message)
    sms_line = output.getvalue().splitlines()[-1]

    assert email_line.startswith("Email")
    assert sms_line.startswith("SMS")
    assert email_line[len("Email"):] == sms_line[len("SMS"):] == f" to {user}: {message}"


def test_service_forwards_to_injected_sender():
    sender = Mock(spec=MessageSender)
    service = NotificationService(sender)

    service.notify("carol", "hi")

    sender.send.assert_called_once_with("carol", "hi")
    assert service.sender is sender


def test_senders_satisfy_protocol(console):
    assert isinstance(EmailSender(console), MessageSender)
    assert isinstance(SmsSender(console), MessageSender)


def test_service_rejects_non_sender():
    with pytest.raises(CapabilityError):
        NotificationService(object())  # type: ignore[arg-type]
