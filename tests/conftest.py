import io
import math
from typing import Callable, List

import pytest
from rich.console import Console

from adapters.console import build_console


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output) -> Console:
    """Console writing to memory instead of stdout."""
    return build_console(file=output)


@pytest.fixture
def lines(output) -> Callable[[], List[str]]:
    """Return the lines written to the in-memory console so far."""
    return lambda: output.getvalue().splitlines()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and SOLID_DEMO_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("SOLID_DEMO_LOG_LEVEL", "SOLID_DEMO_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def expected_lines() -> List[str]:
    """Lines the showcase writes to stdout, in order."""
    return [
        "Invoice #101 amount=999.0",
        "Saved invoice 101",
        f"Total area = {math.pi + 6}",
        "Sparrow flies.",
        "Penguin eats fish.",
        "Printing: Report",
        "MFP scanning",
        "Email to alice@example.com: Welcome!",
        "SMS to +911234567890: OTP: 123456",
    ]
