"""Fiscal sales and purchases books.

Read-only re-projections of invoices and expenses for regulatory export. No
new financial computation happens here: sales figures come from the shipment
financials and purchase figures from the amounts recorded on each expense.
"""

from datetime import date
from typing import Iterable, Optional

from freightbooks.domain.entities import (
    ZERO,
    CompanyConfig,
    DateRange,
    Expense,
    Invoice,
    InvoiceStatus,
    PurchasesBook,
    PurchasesBookRow,
    SalesBook,
    SalesBookRow,
)
from freightbooks.domain.financials import calculate_financial_details
from freightbooks.utils.amount_parser import coerce_amount

BLANK_FISCAL_VALUES = {"", "N/A"}


def has_fiscal_value(value: Optional[str]) -> bool:
    """True unless the value is missing, blank or the literal N/A."""
    if value is None:
        return False
    return value.strip().upper() not in BLANK_FISCAL_VALUES


def is_fiscally_relevant(expense: Expense) -> bool:
    """Only expenses backed by a supplier tax id and invoice number belong in the purchases book."""
    return has_fiscal_value(expense.supplier_rif) and has_fiscal_value(expense.invoice_number)


def sales_book_row(invoice: Invoice, config: CompanyConfig) -> SalesBookRow:
    """Sales book row for one invoice; voided invoices keep their row with zero amounts."""
    voided = invoice.status == InvoiceStatus.VOIDED
    if voided:
        total = base = vat = postal_levy = ZERO
    else:
        financials = calculate_financial_details(invoice.guide, config)
        total = financials.total
        base = financials.subtotal
        vat = financials.vat
        postal_levy = financials.postal_levy

    return SalesBookRow(
        date=invoice.date,
        invoice_number=invoice.invoice_number,
        control_number=invoice.control_number,
        client_name=invoice.client_name,
        client_id_number=invoice.client_id_number,
        total=total,
        base=base,
        vat=vat,
        postal_levy=postal_levy,
        voided=voided,
    )


def build_sales_book(
    invoices: Iterable[Invoice],
    config: CompanyConfig,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> SalesBook:
    """Build the sales book for a period, oldest invoice first."""
    period = DateRange(start_date, end_date)
    selected = sorted(
        (invoice for invoice in invoices if period.contains(invoice.date)),
        key=lambda invoice: invoice.date,
    )
    rows = tuple(sales_book_row(invoice, config) for invoice in selected)

    return SalesBook(
        rows=rows,
        total=sum((row.total for row in rows), ZERO),
        base=sum((row.base for row in rows), ZERO),
        vat=sum((row.vat for row in rows), ZERO),
        postal_levy=sum((row.postal_levy for row in rows), ZERO),
    )


def purchases_book_row(expense: Expense) -> PurchasesBookRow:
    return PurchasesBookRow(
        date=expense.date,
        invoice_number=expense.invoice_number,
        control_number=expense.control_number,
        supplier_name=expense.supplier_name,
        supplier_rif=expense.supplier_rif,
        total=coerce_amount(expense.amount),
        base=coerce_amount(expense.taxable_base),
        vat=coerce_amount(expense.vat_amount),
    )


def build_purchases_book(
    expenses: Iterable[Expense],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> PurchasesBook:
    """Build the purchases book for a period, oldest expense first.

    Expenses without a supplier tax id or supplier invoice number are left
    out entirely.
    """
    period = DateRange(start_date, end_date)
    selected = sorted(
        (
            expense
            for expense in expenses
            if period.contains(expense.date) and is_fiscally_relevant(expense)
        ),
        key=lambda expense: expense.date,
    )
    rows = tuple(purchases_book_row(expense) for expense in selected)

    return PurchasesBook(
        rows=rows,
        total=sum((row.total for row in rows), ZERO),
        base=sum((row.base for row in rows), ZERO),
        vat=sum((row.vat for row in rows), ZERO),
    )
