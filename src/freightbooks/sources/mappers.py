"""Mapper functions to convert backend API payloads into domain entities.

The backend serves camelCase JSON with Spanish status literals. This layer
isolates that wire shape from the engine, coercing loose numeric fields so
that a malformed value degrades to zero instead of failing the whole load.
"""

import logging
from typing import Any, Optional, TypeVar

from freightbooks.domain import entities as domain
from freightbooks.domain.errors import ValidationError
from freightbooks.utils.amount_parser import coerce_amount, coerce_quantity
from freightbooks.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

E = TypeVar("E")

INVOICE_STATUSES = {
    "activa": domain.InvoiceStatus.ACTIVE,
    "active": domain.InvoiceStatus.ACTIVE,
    "anulada": domain.InvoiceStatus.VOIDED,
    "voided": domain.InvoiceStatus.VOIDED,
}

PAYMENT_STATUSES = {
    "pagada": domain.PaymentStatus.PAID,
    "pagado": domain.PaymentStatus.PAID,
    "paid": domain.PaymentStatus.PAID,
    "pendiente": domain.PaymentStatus.PENDING,
    "pending": domain.PaymentStatus.PENDING,
}

EXPENSE_STATUSES = {
    "pagado": domain.ExpenseStatus.PAID,
    "pagada": domain.ExpenseStatus.PAID,
    "paid": domain.ExpenseStatus.PAID,
    "pendiente": domain.ExpenseStatus.PENDING,
    "pending": domain.ExpenseStatus.PENDING,
}

SHIPPING_STATUSES = {
    "pendiente para despacho": domain.ShippingStatus.PENDING,
    "pending": domain.ShippingStatus.PENDING,
    "en tránsito": domain.ShippingStatus.IN_TRANSIT,
    "en transito": domain.ShippingStatus.IN_TRANSIT,
    "in_transit": domain.ShippingStatus.IN_TRANSIT,
    "entregada": domain.ShippingStatus.DELIVERED,
    "delivered": domain.ShippingStatus.DELIVERED,
}

PAYMENT_MODES = {
    "flete-pagado": domain.PaymentMode.PREPAID,
    "prepaid": domain.PaymentMode.PREPAID,
    "flete-destino": domain.PaymentMode.COLLECT,
    "collect": domain.PaymentMode.COLLECT,
}

CURRENCIES = {
    "ves": domain.Currency.LOCAL,
    "local": domain.Currency.LOCAL,
    "usd": domain.Currency.FOREIGN,
    "foreign": domain.Currency.FOREIGN,
}

TRUE_STRINGS = {"true", "1", "yes", "si", "sí"}


def _lookup(mapping: dict[str, E], raw: Any, default: E, field_name: str) -> E:
    """Map a status literal, falling back to the default for unknown values."""
    if raw is None:
        return default
    value = mapping.get(str(raw).strip().lower())
    if value is None:
        logger.warning("Unknown %s %r, using %s", field_name, raw, default.value)
        return default
    return value


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in TRUE_STRINGS
    return bool(raw)


def _to_text(raw: Any) -> str:
    return "" if raw is None else str(raw)


def _optional_text(raw: Any) -> Optional[str]:
    text = _to_text(raw).strip()
    return text or None


def _required_date(payload: dict[str, Any], record: str):
    try:
        return parse_date(payload.get("date"))
    except ValueError as e:
        raise ValidationError(f"{record} {payload.get('id')!r} has an invalid date: {e}")


def cargo_item_to_domain(payload: dict[str, Any]) -> domain.CargoItem:
    """Convert a merchandise payload to a CargoItem."""
    return domain.CargoItem(
        quantity=coerce_quantity(payload.get("quantity")),
        real_weight=coerce_amount(payload.get("weight")),
        length=coerce_amount(payload.get("length")),
        width=coerce_amount(payload.get("width")),
        height=coerce_amount(payload.get("height")),
        category_id=_optional_text(payload.get("categoryId")),
        description=_to_text(payload.get("description")),
    )


def manifest_to_domain(payload: Optional[dict[str, Any]]) -> domain.ShippingManifest:
    """Convert a shipping guide payload to a ShippingManifest.

    A missing or non-object guide yields an empty manifest. Merchandise
    entries that are not objects are skipped with a warning.
    """
    if not isinstance(payload, dict) or not payload:
        return domain.ShippingManifest()

    items = []
    for item in payload.get("merchandise") or []:
        if not isinstance(item, dict):
            logger.warning("Skipping malformed merchandise entry %r", item)
            continue
        items.append(cargo_item_to_domain(item))

    return domain.ShippingManifest(
        items=tuple(items),
        payment_mode=_lookup(
            PAYMENT_MODES, payload.get("paymentType"), domain.PaymentMode.PREPAID, "payment type"
        ),
        currency=_lookup(
            CURRENCIES, payload.get("paymentCurrency"), domain.Currency.LOCAL, "currency"
        ),
        has_insurance=_to_bool(payload.get("hasInsurance")),
        declared_value=coerce_amount(payload.get("declaredValue")),
        insurance_percent=coerce_amount(payload.get("insurancePercentage")),
        has_discount=_to_bool(payload.get("hasDiscount")),
        discount_percent=coerce_amount(payload.get("discountPercentage")),
        payment_method_id=_optional_text(payload.get("paymentMethodId")),
    )


def invoice_to_domain(payload: dict[str, Any]) -> domain.Invoice:
    """Convert an invoice payload to an Invoice entity.

    Raises:
        ValidationError: If the invoice date cannot be parsed
    """
    return domain.Invoice(
        id=_to_text(payload.get("id")),
        date=_required_date(payload, "Invoice"),
        status=_lookup(
            INVOICE_STATUSES, payload.get("status"), domain.InvoiceStatus.ACTIVE, "invoice status"
        ),
        payment_status=_lookup(
            PAYMENT_STATUSES,
            payload.get("paymentStatus"),
            domain.PaymentStatus.PENDING,
            "payment status",
        ),
        total_amount=coerce_amount(payload.get("totalAmount")),
        client_name=_to_text(payload.get("clientName")),
        guide=manifest_to_domain(payload.get("guide")),
        invoice_number=_to_text(payload.get("invoiceNumber")),
        control_number=_to_text(payload.get("controlNumber")),
        client_id_number=_to_text(payload.get("clientIdNumber")),
        shipping_status=_lookup(
            SHIPPING_STATUSES,
            payload.get("shippingStatus"),
            domain.ShippingStatus.PENDING,
            "shipping status",
        ),
    )


def expense_to_domain(payload: dict[str, Any]) -> domain.Expense:
    """Convert an expense payload to an Expense entity.

    Raises:
        ValidationError: If the expense date cannot be parsed
    """
    taxable_base = payload.get("taxableBase")
    return domain.Expense(
        id=_to_text(payload.get("id")),
        date=_required_date(payload, "Expense"),
        status=_lookup(
            EXPENSE_STATUSES, payload.get("status"), domain.ExpenseStatus.PENDING, "expense status"
        ),
        amount=coerce_amount(payload.get("amount")),
        category=_to_text(payload.get("category")),
        supplier_name=_to_text(payload.get("supplierName")),
        taxable_base=None if taxable_base in (None, "") else coerce_amount(taxable_base),
        vat_amount=coerce_amount(payload.get("vatAmount")),
        supplier_rif=_to_text(payload.get("supplierRif")),
        invoice_number=_to_text(payload.get("invoiceNumber")),
        control_number=_to_text(payload.get("controlNumber")),
        description=_to_text(payload.get("description")),
        payment_method_id=_optional_text(payload.get("paymentMethodId")),
    )


def company_config_to_domain(payload: Optional[dict[str, Any]]) -> domain.CompanyConfig:
    """Convert a companyInfo payload to a CompanyConfig snapshot."""
    payload = payload or {}
    return domain.CompanyConfig(
        cost_per_kg=coerce_amount(payload.get("costPerKg")),
        bcv_rate=coerce_amount(payload.get("bcvRate")),
        name=_to_text(payload.get("name")),
        rif=_to_text(payload.get("rif")),
    )


def payment_method_to_domain(payload: dict[str, Any]) -> domain.PaymentMethod:
    """Convert a payment method payload to a PaymentMethod entity."""
    return domain.PaymentMethod(
        id=_to_text(payload.get("id")),
        name=_to_text(payload.get("name")),
    )
