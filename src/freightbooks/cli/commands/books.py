"""Fiscal book commands."""

import click

from freightbooks.cli.date_filters import date_range_options, resolve_cli_date_range
from freightbooks.cli.error_handling import handle_domain_error
from freightbooks.domain.errors import DomainError


@click.command("sales-book")
@date_range_options
@click.pass_context
def sales_book(ctx, start_date, end_date, period_flags):
    """Show the sales book. Voided invoices are listed with zero amounts."""
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        book = service.get_sales_book(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not book.rows:
        click.echo("No invoices found.")
        return

    click.echo(
        f"\n{'Date':<12} {'Invoice':<10} {'Control':<10} {'Client':<25} {'Client ID':<14} "
        f"{'Total':>12} {'Base':>12} {'VAT':>10} {'Postal levy':>12}"
    )
    click.echo("-" * 125)
    for row in book.rows:
        total = "VOIDED" if row.voided else f"{row.total:,.2f}"
        click.echo(
            f"{str(row.date):<12} {row.invoice_number:<10} {row.control_number:<10} "
            f"{row.client_name[:25]:<25} {row.client_id_number:<14} {total:>12} "
            f"{row.base:>12,.2f} {row.vat:>10,.2f} {row.postal_levy:>12,.2f}"
        )
    click.echo("-" * 125)
    click.echo(
        f"{'':<12} {'':<10} {'':<10} {'TOTALS':<25} {'':<14} {book.total:>12,.2f} "
        f"{book.base:>12,.2f} {book.vat:>10,.2f} {book.postal_levy:>12,.2f}"
    )


@click.command("purchases-book")
@date_range_options
@click.pass_context
def purchases_book(ctx, start_date, end_date, period_flags):
    """Show the purchases book.

    Only expenses with both a supplier tax ID and a supplier invoice number
    are included.
    """
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        book = service.get_purchases_book(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not book.rows:
        click.echo("No purchases found.")
        return

    click.echo(
        f"\n{'Date':<12} {'Invoice':<10} {'Control':<10} {'Supplier':<25} {'Supplier RIF':<14} "
        f"{'Total':>12} {'Base':>12} {'VAT':>10}"
    )
    click.echo("-" * 112)
    for row in book.rows:
        click.echo(
            f"{str(row.date):<12} {row.invoice_number:<10} {row.control_number:<10} "
            f"{row.supplier_name[:25]:<25} {row.supplier_rif:<14} {row.total:>12,.2f} "
            f"{row.base:>12,.2f} {row.vat:>10,.2f}"
        )
    click.echo("-" * 112)
    click.echo(
        f"{'':<12} {'':<10} {'':<10} {'TOTALS':<25} {'':<14} {book.total:>12,.2f} "
        f"{book.base:>12,.2f} {book.vat:>10,.2f}"
    )


def register_commands(cli):
    """Register fiscal book commands with main CLI."""
    cli.add_command(sales_book)
    cli.add_command(purchases_book)
