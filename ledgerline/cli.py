"""CLI entry point for ledgerline."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ledgerline.commands.admin import init_command
from ledgerline.commands.ledger import list_command
from ledgerline.commands.shell import shell_command

app = typer.Typer(
    name="ledgerline",
    help="ledgerline - A pipe-delimited personal finance ledger",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Send ledgerline log records to stderr, at DEBUG level when verbose."""
    logger = logging.getLogger("ledgerline")
    if not logger.handlers:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: str = typer.Option(None, "--file", "-f", help="Ledger file (default: from config, else transactions.csv)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ledgerline - A pipe-delimited personal finance ledger."""
    configure_logging(verbose)
    ctx.obj = {"ledger_file": file}

    if ctx.invoked_subcommand is None:
        shell_command(file)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Record deposits and payments and browse the ledger interactively."""
    shell_command(ctx.obj["ledger_file"])


@app.command(name="list")
def list_transactions(
    ctx: typer.Context,
    deposits: bool = typer.Option(False, "--deposits", "-d", help="Show only deposits"),
    payments: bool = typer.Option(False, "--payments", "-p", help="Show only payments"),
    vendor: str = typer.Option(None, "--vendor", help="Exact vendor name (case-insensitive)"),
    since: str = typer.Option(None, "--since", help="First date to include (YYYY-MM-DD)"),
    until: str = typer.Option(None, "--until", help="Last date to include (YYYY-MM-DD)"),
) -> None:
    """List your transactions, newest first."""
    list_command(ctx.obj["ledger_file"], deposits, payments, vendor, since, until)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Initialize ledgerline configuration."""
    init_command(force)


if __name__ == "__main__":
    app()
