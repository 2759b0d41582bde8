"""Ledger listing command and shared record rendering."""

import sys
import tomllib
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ledgerline.config import get_config_path, get_ledger_path
from ledgerline.dates import parse_user_date
from ledgerline.domain.filters import (
    by_date_range,
    by_vendor,
    deposits,
    newest_first,
    payments,
    summarize,
)
from ledgerline.domain.models import Record
from ledgerline.domain.records import format_amount
from ledgerline.store.ledger import LedgerStore

console = Console()


def format_amount_display(amount: float) -> str:
    """Format amount with colour markup for the console.

    Args:
        amount: Signed amount.

    Returns:
        Green for deposits, red for payments.
    """
    if amount < 0:
        return f"[red]{format_amount(amount)}[/red]"
    return f"[green]{format_amount(amount)}[/green]"


def render_records(records: Sequence[Record], title: str) -> None:
    """Print records newest first as a table, followed by totals.

    Args:
        records: Records in file order.
        title: Table title.
    """
    if not records:
        console.print(f"[yellow]No transactions found ({title})[/yellow]")
        return

    table = Table(title=f"{title} ({len(records)})")
    table.add_column("Date", style="cyan")
    table.add_column("Time", style="dim")
    table.add_column("Description", style="white")
    table.add_column("Vendor", style="magenta")
    table.add_column("Amount", justify="right")

    for record in newest_first(records):
        table.add_row(
            record.date.isoformat(),
            record.time.strftime("%H:%M:%S"),
            record.description,
            record.vendor,
            format_amount_display(record.amount),
        )

    console.print(table)

    summary = summarize(records)
    console.print(
        f"[bold]Deposits:[/bold] {format_amount_display(summary.deposits)}  "
        f"[bold]Payments:[/bold] {format_amount_display(summary.payments)}  "
        f"[bold]Net:[/bold] {format_amount_display(summary.net)}"
    )


def resolve_ledger_path(ledger_file: str | None) -> Path:
    """Find the ledger file, exiting if the config file cannot be parsed.

    Args:
        ledger_file: Ledger path override, or None to use the config.

    Returns:
        Path to the ledger file.
    """
    try:
        return get_ledger_path(ledger_file)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config {get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)


def open_store(ledger_file: str | None) -> LedgerStore:
    """Load the ledger, reporting what happened.

    Args:
        ledger_file: Ledger path override, or None to use the config.

    Returns:
        Loaded store. If the load failed the store is empty.
    """
    store = LedgerStore(resolve_ledger_path(ledger_file))
    result = store.load()

    if result.error:
        console.print(f"[red]Error loading transactions: {result.error}[/red]", style="bold")
    elif result.created:
        console.print(f"[yellow]No ledger found, created empty file at {store.path}[/yellow]")
    elif result.skipped:
        console.print(f"[dim]Skipped {result.skipped} incomplete lines[/dim]")

    return store


def list_command(
    ledger_file: str | None = None,
    deposits_only: bool = False,
    payments_only: bool = False,
    vendor: str | None = None,
    since: str | None = None,
    until: str | None = None,
) -> None:
    """List ledger entries, optionally filtered."""
    if deposits_only and payments_only:
        console.print("[red]Use only one of --deposits and --payments[/red]", style="bold")
        sys.exit(1)

    try:
        start = parse_user_date(since or "")
        end = parse_user_date(until or "")
    except ValueError as e:
        console.print(f"[red]Invalid date: {e}[/red]", style="bold")
        sys.exit(1)

    store = LedgerStore(resolve_ledger_path(ledger_file))
    result = store.load()
    if result.error:
        console.print(f"[red]Error loading transactions: {result.error}[/red]", style="bold")
        sys.exit(1)

    records: list[Record] = list(store)
    title = "Ledger"

    if deposits_only:
        records = deposits(records)
        title = "Deposits"
    elif payments_only:
        records = payments(records)
        title = "Payments"

    if vendor:
        records = by_vendor(records, vendor)
        title = f"{title} - {vendor.strip()}"

    if start or end:
        records = by_date_range(records, start, end)
        title = f"{title} - {start or '...'} to {end or '...'}"

    render_records(records, title)
