"""Typer CLI.

The only command runs the five examples. It takes no options: all behavior
is fixed, and configuration (`SOLID_DEMO_*`) only controls logging on stderr.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.markup import escape

from adapters.console import build_console
from core.config import AppSettings
from core.errors import SolidDemoError
from core.logging_config import configure_logging
from core.services.showcase import run_showcase

app = typer.Typer(
    add_completion=False,
    help="Walk through the five SOLID principles with small examples.",
)


@app.command()
def showcase() -> None:
    """Run the SRP, OCP, LSP, ISP and DIP examples in order."""

    err_console = build_console(stderr=True)
    try:
        settings = AppSettings()
    except ValidationError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc

    configure_logging(settings)

    try:
        run_showcase(build_console())
    except SolidDemoError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
