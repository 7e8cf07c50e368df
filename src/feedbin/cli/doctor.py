"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from feedbin.adapters.http_client import build_http_client
from feedbin.cli.ui_components import build_error_panel
from feedbin.core.config import DEFAULT_BASE_URL, ClientSettings, Endpoint, load_settings, write_user_env_vars
from feedbin.core.errors import ConfigurationError, FeedbinError
from feedbin.core.services.client import FeedbinClient

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: ClientSettings) -> tuple[bool, str]:
    try:
        with build_http_client(settings) as client:
            response = client.get(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_auth(settings: ClientSettings) -> tuple[bool, str]:
    try:
        with FeedbinClient(settings) as client:
            ok = client.check_authentication()
    except FeedbinError as exc:
        return False, str(exc)
    return ok, "Credentials accepted" if ok else "401 Unauthorized"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=2) from exc

    table = Table(title="feedbin-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_credentials = bool(settings.email) and settings.password is not None
    table.add_row(
        "Credentials",
        "OK" if has_credentials else "MISSING",
        settings.email or "Set FEEDBIN_EMAIL / FEEDBIN_PASSWORD or run `feedbin doctor setup`",
    )
    try:
        endpoint = Endpoint.parse(settings.base_url)
        table.add_row("Base URL", "OK", endpoint.base_url)
        base_ok = True
    except FeedbinError as exc:
        table.add_row("Base URL", "FAIL", str(exc))
        base_ok = False

    if base_ok:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
        if has_credentials and ok_http:
            ok_auth, detail_auth = _check_auth(settings)
            table.add_row("Authentication", "OK" if ok_auth else "FAIL", detail_auth)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive credential setup (stored in the user config .env)."""

    email = typer.prompt("Feedbin email").strip()
    password = typer.prompt("Feedbin password", hide_input=True, confirmation_prompt=False)
    base_url = typer.prompt("API base URL", default=DEFAULT_BASE_URL, show_default=True).strip()

    if not email or not password:
        raise typer.BadParameter("email and password are required")
    try:
        Endpoint.parse(base_url)
    except FeedbinError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            "FEEDBIN_EMAIL": email,
            "FEEDBIN_PASSWORD": password,
            "FEEDBIN_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
