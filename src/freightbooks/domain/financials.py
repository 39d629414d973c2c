"""Shipment financial calculator.

Derives the full financial breakdown of a shipment from its cargo manifest and
a snapshot of the company configuration. Pure and deterministic: the same
manifest and configuration always produce the same ``Financials``.
"""

from decimal import Decimal
from typing import Any, Optional

from freightbooks.domain.entities import (
    ZERO,
    CargoItem,
    CompanyConfig,
    Currency,
    Financials,
    ItemTaxAllocation,
    ShippingManifest,
)
from freightbooks.utils.amount_parser import coerce_amount, coerce_quantity

VOLUMETRIC_DIVISOR = Decimal("5000")
HANDLING_FEE = Decimal("10")
POSTAL_LEVY_RATE = Decimal("0.06")
POSTAL_LEVY_MAX_WEIGHT = Decimal("30.99")
# VAT is suppressed under the cooperative's tax regime
VAT_RATE = Decimal("0")
FX_TAX_RATE = Decimal("0.03")
HUNDRED = Decimal("100")


def volumetric_weight(item: CargoItem) -> Decimal:
    """Space-equivalent weight of one unit: (L x W x H) / 5000."""
    return (
        coerce_amount(item.length) * coerce_amount(item.width) * coerce_amount(item.height)
    ) / VOLUMETRIC_DIVISOR


def chargeable_weight_per_unit(item: CargoItem) -> Decimal:
    """Greater of the real and volumetric weight of one unit."""
    return max(coerce_amount(item.real_weight), volumetric_weight(item))


def item_chargeable_weight(item: CargoItem) -> Decimal:
    return chargeable_weight_per_unit(item) * coerce_quantity(item.quantity)


def calculate_chargeable_weight(manifest: Optional[ShippingManifest]) -> Decimal:
    """Total chargeable weight in kg of every item in a manifest."""
    if manifest is None:
        return ZERO
    return sum((item_chargeable_weight(item) for item in manifest.items), ZERO)


def qualifies_for_postal_levy(item: CargoItem) -> bool:
    """Small packages, up to 30.99 kg per unit, carry the postal levy."""
    weight = chargeable_weight_per_unit(item)
    return ZERO < weight <= POSTAL_LEVY_MAX_WEIGHT


def _percent_of(amount: Decimal, percent: Any) -> Decimal:
    return amount * (coerce_amount(percent) / HUNDRED)


def calculate_financial_details(
    manifest: Optional[ShippingManifest], config: CompanyConfig
) -> Financials:
    """Calculate all financial details for a shipment.

    Args:
        manifest: Shipping manifest with cargo items and pricing options
        config: Company configuration snapshot (only ``cost_per_kg`` is read)

    Returns:
        Financials with freight, insurance, handling, discount, subtotal,
        postal levy, VAT, FX tax and total
    """
    if manifest is None or not manifest.items:
        return Financials()

    cost_per_kg = coerce_amount(config.cost_per_kg)
    total_weight = calculate_chargeable_weight(manifest)

    freight = total_weight * cost_per_kg
    # Not clamped: a discount above 100% yields negative net freight
    discount = _percent_of(freight, manifest.discount_percent) if manifest.has_discount else ZERO
    freight_after_discount = freight - discount

    insurance_cost = ZERO
    if manifest.has_insurance:
        insurance_cost = _percent_of(
            coerce_amount(manifest.declared_value), manifest.insurance_percent
        )

    handling = HANDLING_FEE if total_weight > 0 else ZERO
    subtotal = freight_after_discount + insurance_cost + handling

    postal_levy_base = sum(
        (
            item_chargeable_weight(item) * cost_per_kg
            for item in manifest.items
            if qualifies_for_postal_levy(item)
        ),
        ZERO,
    )
    postal_levy = postal_levy_base * POSTAL_LEVY_RATE

    vat = subtotal * VAT_RATE
    pre_fx_total = subtotal + postal_levy + vat
    fx_tax = pre_fx_total * FX_TAX_RATE if manifest.currency == Currency.FOREIGN else ZERO
    total = pre_fx_total + fx_tax

    return Financials(
        freight=freight,
        insurance_cost=insurance_cost,
        handling=handling,
        discount=discount,
        subtotal=subtotal,
        postal_levy=postal_levy,
        vat=vat,
        fx_tax=fx_tax,
        total=total,
    )


def allocate_item_taxes(
    manifest: Optional[ShippingManifest],
    config: CompanyConfig,
    financials: Financials,
) -> list[ItemTaxAllocation]:
    """Spread invoice-level VAT and postal levy across cargo items.

    VAT is allocated by each item's share of the freight before discount. The
    postal levy is allocated only among qualifying items, by their share of the
    levy base. Returns one allocation per item, in manifest order; all zero when
    there is no freight to allocate against.
    """
    if manifest is None or not manifest.items:
        return []

    cost_per_kg = coerce_amount(config.cost_per_kg)
    item_freights = [item_chargeable_weight(item) * cost_per_kg for item in manifest.items]
    total_freight = sum(item_freights, ZERO)
    levy_base = sum(
        (
            freight
            for item, freight in zip(manifest.items, item_freights)
            if qualifies_for_postal_levy(item)
        ),
        ZERO,
    )

    if total_freight <= 0:
        return [ItemTaxAllocation() for _ in manifest.items]

    allocations = []
    for item, freight in zip(manifest.items, item_freights):
        vat = financials.vat * (freight / total_freight)
        postal_levy = ZERO
        if levy_base > 0 and qualifies_for_postal_levy(item):
            postal_levy = financials.postal_levy * (freight / levy_base)
        allocations.append(ItemTaxAllocation(vat=vat, postal_levy=postal_levy))
    return allocations
