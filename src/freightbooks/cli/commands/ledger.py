"""Ledger commands."""

import click

from freightbooks.cli.date_filters import date_range_options, resolve_cli_date_range
from freightbooks.cli.error_handling import handle_domain_error
from freightbooks.domain.entities import LedgerAccount
from freightbooks.domain.errors import DomainError


def _display_account(account: LedgerAccount) -> None:
    click.echo(f"\n{account.account_name}")
    click.echo("-" * 100)
    click.echo(f"{'Date':<12} {'Description':<40} {'Debit':>15} {'Credit':>15} {'Balance':>15}")
    for line in account.entries:
        debit = f"{line.debit:,.2f}" if line.debit else ""
        credit = f"{line.credit:,.2f}" if line.credit else ""
        click.echo(
            f"{str(line.date):<12} {line.description[:40]:<40} {debit:>15} {credit:>15} "
            f"{line.balance:>15,.2f}"
        )
    click.echo("-" * 100)
    click.echo(
        f"{'':<12} {'Totals':<40} {account.total_debit:>15,.2f} {account.total_credit:>15,.2f} "
        f"{account.final_balance:>15,.2f}"
    )


@click.command("ledger")
@click.option("--account", help="Show the subsidiary ledger of this account only")
@date_range_options
@click.pass_context
def show_ledger(ctx, account, start_date, end_date, period_flags):
    """Show the general ledger, or the subsidiary ledger of one account."""
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        if account:
            accounts = [service.get_subsidiary_ledger(account, start_date=start, end_date=end)]
        else:
            accounts = list(service.get_general_ledger(start_date=start, end_date=end).values())
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not accounts or (account and not accounts[0].entries):
        click.echo("No ledger movements found.")
        return

    for ledger_account in accounts:
        _display_account(ledger_account)


@click.command("accounts")
@date_range_options
@click.pass_context
def list_account_names(ctx, start_date, end_date, period_flags):
    """List the accounts used by the journal."""
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        names = service.list_accounts(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not names:
        click.echo("No accounts found.")
        return

    for name in names:
        click.echo(name)


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(show_ledger)
    cli.add_command(list_account_names)
