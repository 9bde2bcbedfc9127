"""Entry routine for the five examples.

Runs the examples in a fixed order (SRP, OCP, LSP, ISP, DIP) and writes one
line per operation to the console. The CLI only builds the console and calls
`run_showcase`, so tests can reuse the same flow with an in-memory console.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from rich.console import Console

from adapters.billing import InvoicePrinter, InvoiceSaver
from adapters.birds import Penguin, Sparrow
from adapters.console import build_console, emit_line
from adapters.message_senders import EmailSender, SmsSender
from adapters.office_devices import MultiFunctionPrinter, SimplePrinter
from core.domain.models import Circle, Invoice, Rectangle
from core.services.area_calculator import AreaCalculator
from core.services.flight import let_it_fly
from core.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

Example = Callable[[Console], None]


def single_responsibility(console: Console) -> None:
    invoice = Invoice(id=101, amount=999.0)
    InvoicePrinter(console).print(invoice)
    InvoiceSaver(console).save(invoice)


def open_closed(console: Console) -> None:
    shapes = [Circle(radius=1), Rectangle(width=2, height=3)]
    emit_line(console, f"Total area = {AreaCalculator().total_area(shapes)}")


def liskov_substitution(console: Console) -> None:
    let_it_fly(Sparrow(console))
    # A penguin is only ever asked to eat.
    Penguin(console).eat()


def interface_segregation(console: Console) -> None:
    printer = SimplePrinter(console)
    printer.print("Report")
    mfp = MultiFunctionPrinter(console)
    mfp.scan()


def dependency_inversion(console: Console) -> None:
    NotificationService(EmailSender(console)).notify("alice@example.com", "Welcome!")
    NotificationService(SmsSender(console)).notify("+911234567890", "OTP: 123456")


EXAMPLES: Sequence[tuple[str, Example]] = (
    ("single responsibility", single_responsibility),
    ("open/closed", open_closed),
    ("liskov substitution", liskov_substitution),
    ("interface segregation", interface_segregation),
    ("dependency inversion", dependency_inversion),
)


def run_showcase(console: Console | None = None) -> None:
    """Run every example in order on `console` (stdout by default)."""

    console = console or build_console()
    for name, example in EXAMPLES:
        logger.debug("Running %s example", name)
        example(console)
