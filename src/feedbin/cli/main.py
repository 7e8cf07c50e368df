"""Typer root application (`feedbin` console script).

Exit codes: 0 ok, 1 API/transport/decode error, 2 configuration error.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from feedbin.api import Feedbin
from feedbin.cli import doctor
from feedbin.cli.ui_components import build_error_panel, build_subscriptions_table, print_banner
from feedbin.core.config import load_settings
from feedbin.core.errors import ConfigurationError, FeedbinError
from feedbin.core.logging import configure_logging
from feedbin.core.services.client import FeedbinClient

app = typer.Typer(no_args_is_help=True, help="Feedbin API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests (DEBUG)."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner."),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    if banner:
        print_banner(_console)


def _open() -> Feedbin:
    try:
        return Feedbin(FeedbinClient(load_settings()))
    except ConfigurationError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=2) from exc


@app.command()
def subscriptions() -> None:
    """List subscriptions."""

    with _open() as fb:
        try:
            subs = fb.subscriptions.list()
        except FeedbinError as exc:
            _console.print(build_error_panel(exc))
            raise typer.Exit(code=1) from exc
    _console.print(build_subscriptions_table(subs))


@app.command()
def unread(limit: int = typer.Option(20, min=0, help="How many IDs to show.")) -> None:
    """Show the unread entry count and the first IDs."""

    with _open() as fb:
        try:
            ids = fb.unread.list()
        except FeedbinError as exc:
            _console.print(build_error_panel(exc))
            raise typer.Exit(code=1) from exc
    _console.print(f"[bold]{len(ids)}[/bold] unread entries")
    if ids and limit:
        _console.print(", ".join(str(i) for i in ids[:limit]), style="dim")


def run() -> None:
    app()
