"""Rich console builder.

Why a builder:
- All variants write through the same kind of console, like
  `build_async_client` did for HTTP.
- Tests can pass a console that writes to memory.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console


def build_console(*, file: IO[str] | None = None, stderr: bool = False) -> Console:
    """Create a `Console` on stdout (or stderr, or `file`)."""

    return Console(file=file, stderr=stderr, soft_wrap=True)


def emit_line(console: Console, text: str) -> None:
    """Write one line exactly as given.

    Markup, highlighting and emoji codes are disabled: `[`, `:` and numbers
    in recipients or messages must reach the output unchanged.
    """

    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
