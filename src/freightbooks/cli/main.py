"""Main CLI entry point."""

import logging
from decimal import Decimal

import click

from freightbooks.domain.reports import AccountingService
from freightbooks.sources.factories import create_json_source

# Import and register all commands at module level
from freightbooks.cli.commands import (
    financials,
    transactions,
    journal,
    ledger,
    books,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@click.group()
@click.option(
    "--data-path",
    type=click.Path(),
    help="Path to the JSON data snapshot (overrides FREIGHTBOOKS_DATA_PATH environment variable)",
    envvar="FREIGHTBOOKS_DATA_PATH",
)
@click.option(
    "--cost-per-kg",
    type=click.FLOAT,
    help="Freight rate per kg to use instead of the configured one",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_path: str | None, cost_per_kg: float | None, verbose: bool):
    """Freightbooks - accounting for a freight cooperative.

    Derives shipment financials, journal entries, ledgers and fiscal books
    from the invoices and expenses served by the back-office API.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

    # Open the source only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        source = create_json_source(data_path=data_path)
        source.connect()
        ctx.call_on_close(source.disconnect)
        rate = Decimal(str(cost_per_kg)) if cost_per_kg is not None else None
        ctx.obj["source"] = source
        ctx.obj["service"] = AccountingService(source, cost_per_kg=rate)


# Register all commands
financials.register_commands(cli)
transactions.register_commands(cli)
journal.register_commands(cli)
ledger.register_commands(cli)
books.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
