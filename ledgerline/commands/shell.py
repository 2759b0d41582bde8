"""Interactive menu shell for recording and browsing the ledger."""

from collections.abc import Callable
from datetime import date, datetime

import typer
from rich.console import Console

from ledgerline.commands.ledger import open_store, render_records
from ledgerline.dates import (
    month_to_date,
    parse_user_amount,
    parse_user_date,
    previous_month,
    previous_year,
    year_to_date,
)
from ledgerline.domain.filters import (
    CustomQuery,
    by_custom_query,
    by_date_range,
    by_vendor,
    deposits,
    payments,
)
from ledgerline.domain.records import format_amount, new_record
from ledgerline.store.ledger import LedgerStore

console = Console()

HOME_MENU = [("D", "Add Deposit"), ("P", "Make Payment (Debit)"), ("L", "Ledger"), ("X", "Exit")]
LEDGER_MENU = [("A", "All"), ("D", "Deposits"), ("P", "Payments"), ("R", "Reports"), ("H", "Home")]
REPORTS_MENU = [
    ("1", "Month To Date"),
    ("2", "Previous Month"),
    ("3", "Year To Date"),
    ("4", "Previous Year"),
    ("5", "Search by Vendor"),
    ("6", "Custom Search"),
    ("0", "Back"),
]

PERIOD_REPORTS: dict[str, Callable[[date], tuple[date, date, str]]] = {
    "1": month_to_date,
    "2": previous_month,
    "3": year_to_date,
    "4": previous_year,
}


def prompt_menu_choice(title: str, options: list[tuple[str, str]]) -> str:
    """Display a menu and prompt for a choice.

    Args:
        title: Menu heading.
        options: List of (key, label) pairs.

    Returns:
        Choice, trimmed and upper-cased.
    """
    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for key, label in options:
        console.print(f"  {key}) {label}")
    choice: str = typer.prompt("Choose an option", type=str, default="", show_default=False)
    return choice.strip().upper()


def add_entry(store: LedgerStore, is_payment: bool) -> None:
    """Prompt for an entry and append it to the ledger.

    Args:
        store: Ledger to append to.
        is_payment: Whether the entered amount is stored as a payment.
    """
    kind = "Payment" if is_payment else "Deposit"
    console.print(f"\n[bold]New {kind.lower()}[/bold]")

    description: str = typer.prompt("Description", type=str, default="", show_default=False)
    vendor: str = typer.prompt("Vendor", type=str, default="", show_default=False)
    raw_amount: str = typer.prompt("Amount (positive number)", type=str, default="", show_default=False)

    try:
        magnitude = parse_user_amount(raw_amount)
    except ValueError:
        console.print(f"[red]Invalid amount: {raw_amount}[/red]")
        return

    if magnitude is None:
        console.print("[red]Amount is required[/red]")
        return

    record, error = new_record(description, vendor, magnitude, is_payment, datetime.now())
    if record is None:
        console.print(f"[red]{error}[/red]")
        return

    write_error = store.append(record)
    if write_error:
        console.print(f"[red]Error writing transaction: {write_error}[/red]")
        return

    console.print(f"[green]✓[/green] {kind} of {format_amount(record.amount)} recorded")


def search_by_vendor(store: LedgerStore) -> None:
    """Prompt for a vendor name and list its entries."""
    name: str = typer.prompt("Vendor name", type=str, default="", show_default=False)
    if not name.strip():
        console.print("[red]Vendor name is required[/red]")
        return

    render_records(by_vendor(store, name), f"Vendor: {name.strip()}")


def prompt_custom_query() -> CustomQuery | None:
    """Prompt for custom search criteria, any of which may be left blank.

    Returns:
        CustomQuery, or None if a date or amount could not be parsed.
    """
    console.print("[dim]Leave any field blank to ignore it[/dim]")
    raw_start: str = typer.prompt("Start date (YYYY-MM-DD)", type=str, default="", show_default=False)
    raw_end: str = typer.prompt("End date (YYYY-MM-DD)", type=str, default="", show_default=False)
    description: str = typer.prompt("Description contains", type=str, default="", show_default=False)
    vendor: str = typer.prompt("Vendor contains", type=str, default="", show_default=False)
    raw_amount: str = typer.prompt("Exact amount", type=str, default="", show_default=False)

    try:
        start = parse_user_date(raw_start)
        end = parse_user_date(raw_end)
    except ValueError as e:
        console.print(f"[red]Invalid date: {e}[/red]")
        return None

    try:
        amount = parse_user_amount(raw_amount)
    except ValueError:
        console.print(f"[red]Invalid amount: {raw_amount}[/red]")
        return None

    return CustomQuery(start=start, end=end, description=description, vendor=vendor, amount=amount)


def custom_search(store: LedgerStore) -> None:
    """Run a conjunctive search over date range, description, vendor and amount."""
    query = prompt_custom_query()
    if query is None:
        return

    render_records(by_custom_query(store, query), "Custom Search")


def reports_menu(store: LedgerStore) -> None:
    """Run the reports menu until the user goes back."""
    while True:
        choice = prompt_menu_choice("Reports", REPORTS_MENU)

        if choice in PERIOD_REPORTS:
            start, end, label = PERIOD_REPORTS[choice](date.today())
            render_records(by_date_range(store, start, end), label)
        elif choice == "5":
            search_by_vendor(store)
        elif choice == "6":
            custom_search(store)
        elif choice == "0":
            return
        else:
            console.print("[red]Invalid option[/red]")


def ledger_menu(store: LedgerStore) -> None:
    """Run the ledger menu until the user goes home."""
    while True:
        choice = prompt_menu_choice("Ledger", LEDGER_MENU)

        if choice == "A":
            render_records(store.records, "All Transactions")
        elif choice == "D":
            render_records(deposits(store), "Deposits")
        elif choice == "P":
            render_records(payments(store), "Payments")
        elif choice == "R":
            reports_menu(store)
        elif choice == "H":
            return
        else:
            console.print("[red]Invalid option[/red]")


def run_shell(store: LedgerStore) -> None:
    """Run the home menu until the user exits.

    Args:
        store: Loaded ledger shared by every menu.
    """
    while True:
        choice = prompt_menu_choice("Home", HOME_MENU)

        if choice == "D":
            add_entry(store, is_payment=False)
        elif choice == "P":
            add_entry(store, is_payment=True)
        elif choice == "L":
            ledger_menu(store)
        elif choice == "X":
            console.print("[dim]Goodbye[/dim]")
            return
        else:
            console.print("[red]Invalid option[/red]")


def shell_command(ledger_file: str | None = None) -> None:
    """Load the ledger and start the interactive shell."""
    store = open_store(ledger_file)

    try:
        run_shell(store)
    except typer.Abort:
        console.print("\n[dim]Goodbye[/dim]")
