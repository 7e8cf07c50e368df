"""Rich UI components for the CLI.

Kept apart from the commands so tables/panels can be reused.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from feedbin import __version__
from feedbin.core.domain.models import Subscription
from feedbin.core.errors import APIError, FeedbinError


def print_banner(console: Console) -> None:
    title = Text("feedbin-client", style="bold cyan")
    subtitle = Text(f"Feedbin v2 API client • {__version__}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_subscriptions_table(subscriptions: list[Subscription]) -> Table:
    table = Table(title=f"Subscriptions ({len(subscriptions)})")
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Feed", style="dim", justify="right")
    table.add_column("Title", style="white")
    table.add_column("Feed URL", style="magenta")
    for sub in subscriptions:
        table.add_row(str(sub.id), str(sub.feed_id), sub.title or "", sub.feed_url)
    return table


def build_error_panel(error: FeedbinError) -> Panel:
    """Panel describing a failed call (kind, status, retryability)."""

    body = Text()
    body.append(f"{type(error).__name__}\n", style="bold")
    if isinstance(error, APIError):
        body.append(f"HTTP {error.status_code} • {error.kind.value}\n")
        body.append(error.message + "\n")
        body.append(f"Retryable: {'yes' if error.retryable else 'no'}", style="dim")
        if error.retry_after is not None:
            body.append(f" (Retry-After {error.retry_after:.0f}s)", style="dim")
    else:
        body.append(str(error))
    return Panel(body, title=Text("Error", style="bold red"), border_style="red")
