"""Journal book command."""

import click

from freightbooks.cli.date_filters import date_range_options, resolve_cli_date_range
from freightbooks.cli.error_handling import handle_domain_error
from freightbooks.domain.errors import DomainError
from freightbooks.domain.journal import find_unbalanced, journal_totals


def _amount(value) -> str:
    return f"{value:,.2f}" if value else ""


@click.command("journal")
@date_range_options
@click.pass_context
def show_journal(ctx, start_date, end_date, period_flags):
    """Show journal entries, oldest first."""
    service = ctx.obj["service"]
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    try:
        entries = service.get_journal(start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\n{'Date':<12} {'Account':<50} {'Debit':>15} {'Credit':>15}")
    click.echo("=" * 95)
    for entry in entries:
        for index, line in enumerate(entry.lines):
            day = str(entry.date) if index == 0 else ""
            # Credit lines are indented under the debits
            account = f"    {line.account_name}" if line.credit else line.account_name
            click.echo(
                f"{day:<12} {account[:50]:<50} {_amount(line.debit):>15} {_amount(line.credit):>15}"
            )
        click.echo(f"{'':<12} To record {entry.description}")
        click.echo("-" * 95)

    total_debit, total_credit = journal_totals(entries)
    click.echo(f"{'':<12} {'EQUAL SUMS':<50} {total_debit:>15,.2f} {total_credit:>15,.2f}")

    unbalanced = find_unbalanced(entries)
    if unbalanced:
        ids = ", ".join(entry.id for entry in unbalanced)
        click.echo(f"Warning: unbalanced journal entries: {ids}", err=True)


def register_commands(cli):
    """Register journal command with main CLI."""
    cli.add_command(show_journal)
