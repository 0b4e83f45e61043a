"""Mini README: Entry point CLI for the gig earnings companion.

This script exposes a Typer CLI with two commands: ``run`` starts the FastAPI
ledger host with uvicorn, and ``summary`` loads the stored ledger from the
configured backend and prints its totals. Both read defaults from
``GIGLEDGER_*`` settings.
"""

from __future__ import annotations

import asyncio

import typer
import uvicorn

from gigledger.configuration import get_settings
from gigledger.finance import EarningsLedger, LedgerPersistenceError, LedgerSession, format_rupees
from gigledger.interface.web_app import build_store
from gigledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Serve and inspect the gig earnings ledger.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the ledger API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    typer.echo(f"Serving the earnings ledger on http://{effective_host}:{effective_port}")
    uvicorn.run(
        "gigledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print the stored ledger's totals and goal progress."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    session = LedgerSession(
        build_store(settings),
        key=settings.storage_key,
        ledger=EarningsLedger(
            monthly_goal=settings.default_monthly_goal,
            strict_parsing=settings.strict_parsing,
        ),
        strict_parsing=settings.strict_parsing,
    )
    try:
        loaded = asyncio.run(session.load())
    except LedgerPersistenceError as error:
        typer.echo(f"Could not load ledger: {error}", err=True)
        raise typer.Exit(code=1) from error
    if not loaded:
        typer.echo("No saved ledger yet; showing defaults.")

    ledger = session.ledger
    for entry in ledger.platform_distribution():
        typer.echo(f"{entry['platform']:<12}{format_rupees(entry['amount'])}")
    typer.echo(f"{'Earnings':<12}{format_rupees(ledger.monthly_earnings)}")
    typer.echo(f"{'Expenses':<12}{format_rupees(ledger.total_expenses())}")
    typer.echo(f"{'Net':<12}{format_rupees(ledger.net_earnings())}")
    typer.echo(
        f"Goal {format_rupees(ledger.monthly_goal)}: "
        f"{ledger.progress_percentage():.1f}% reached, "
        f"{format_rupees(ledger.remaining_to_goal())} to go"
    )


if __name__ == "__main__":
    cli()
