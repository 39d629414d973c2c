"""Invoice financial breakdown command."""

import click

from freightbooks.cli.error_handling import handle_domain_error
from freightbooks.domain.errors import DomainError


@click.command("financials")
@click.argument("invoice_id")
@click.option("--items", is_flag=True, help="Show the VAT and postal levy carried by each cargo item")
@click.pass_context
def show_financials(ctx, invoice_id: str, items: bool):
    """Show the financial breakdown of an invoice."""
    service = ctx.obj["service"]

    try:
        result = service.get_invoice_financials(invoice_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    invoice = result.invoice
    f = result.financials
    click.echo(f"\nInvoice {invoice.invoice_number or invoice.id} - {invoice.client_name}")
    click.echo(f"Status: {invoice.status.value}, payment: {invoice.payment_status.value}, "
               f"mode: {invoice.guide.payment_mode.value}, currency: {invoice.guide.currency.value}")
    click.echo(f"Chargeable weight: {result.chargeable_weight:,.2f} kg")
    click.echo("-" * 40)

    rows = [
        ("Freight", f.freight),
        ("Less discount", f.discount),
        ("Insurance", f.insurance_cost),
        ("Handling", f.handling),
        ("Subtotal", f.subtotal),
        ("Postal levy", f.postal_levy),
        ("VAT", f.vat),
        ("FX tax", f.fx_tax),
    ]
    for label, amount in rows:
        click.echo(f"{label:<20} {amount:>19,.2f}")
    click.echo("-" * 40)
    click.echo(f"{'Total':<20} {f.total:>19,.2f}")

    if items:
        click.echo(f"\n{'#':<4} {'Description':<30} {'VAT':>12} {'Postal levy':>14}")
        for index, (item, taxes) in enumerate(zip(invoice.guide.items, result.item_taxes), start=1):
            click.echo(
                f"{index:<4} {item.description[:30]:<30} {taxes.vat:>12,.2f} {taxes.postal_levy:>14,.2f}"
            )


def register_commands(cli):
    """Register financials command with main CLI."""
    cli.add_command(show_financials)
