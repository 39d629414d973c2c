"""Transaction listing command."""

import click

from freightbooks.cli.date_filters import date_range_options, resolve_cli_date_range
from freightbooks.cli.error_handling import handle_domain_error
from freightbooks.domain.entities import TransactionKind
from freightbooks.domain.errors import DomainError
from freightbooks.domain.transactions import summarize_transactions


@click.command("transactions")
@click.option("--income", "kind", flag_value=TransactionKind.INCOME.value, help="Only income")
@click.option("--expense", "kind", flag_value=TransactionKind.EXPENSE.value, help="Only expenses")
@date_range_options
@click.pass_context
def list_transactions(ctx, kind, start_date, end_date, period_flags):
    """List income and expense transactions, newest first.

    Voided invoices are never listed.
    """
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        txns = service.list_transactions(
            start_date=start,
            end_date=end,
            kind=TransactionKind(kind) if kind else None,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not txns:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(txns)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<14} {'Date':<12} {'Description':<40} {'Status':<10} {'Income':>10} {'Expense':>10}"
    )
    click.echo("-" * 100)
    for txn in txns:
        income = f"{txn.amount:,.2f}" if txn.kind == TransactionKind.INCOME else ""
        expense = f"{txn.amount:,.2f}" if txn.kind == TransactionKind.EXPENSE else ""
        click.echo(
            f"{txn.id:<14} {str(txn.date):<12} {txn.description[:40]:<40} {txn.status:<10} "
            f"{income:>10} {expense:>10}"
        )

    totals = summarize_transactions(txns)
    click.echo("-" * 100)
    click.echo(f"{'Total income:':<20} {totals.income:>15,.2f}")
    click.echo(f"{'Total expenses:':<20} {totals.expense:>15,.2f}")
    click.echo(f"{'Net:':<20} {totals.net:>15,.2f}")


def register_commands(cli):
    """Register transactions command with main CLI."""
    cli.add_command(list_transactions)
