"""Transaction normalizer.

Maps invoices and expenses into a single ``Transaction`` shape so the journal
and the reports can treat both kinds of business event uniformly.
"""

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from freightbooks.domain.entities import (
    ZERO,
    DateRange,
    Expense,
    Invoice,
    InvoiceStatus,
    Transaction,
    TransactionKind,
    TransactionTotals,
)
from freightbooks.utils.amount_parser import coerce_amount

logger = logging.getLogger(__name__)

INCOME_ID_PREFIX = "inc-"
EXPENSE_ID_PREFIX = "exp-"


def invoice_to_transaction(invoice: Invoice) -> Transaction:
    return Transaction(
        id=f"{INCOME_ID_PREFIX}{invoice.id}",
        date=invoice.date,
        kind=TransactionKind.INCOME,
        amount=coerce_amount(invoice.total_amount),
        status=invoice.status.value,
        description=f"Invoice No. {invoice.invoice_number} income",
        source=invoice,
    )


def expense_to_transaction(expense: Expense) -> Transaction:
    return Transaction(
        id=f"{EXPENSE_ID_PREFIX}{expense.id}",
        date=expense.date,
        kind=TransactionKind.EXPENSE,
        amount=coerce_amount(expense.amount),
        status=expense.status.value,
        description=expense.description,
        source=expense,
    )


def normalize_transactions(
    invoices: Iterable[Invoice],
    expenses: Iterable[Expense],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    kind: Optional[TransactionKind] = None,
) -> list[Transaction]:
    """Build the transaction list for a period.

    Voided invoices never become transactions. Both date bounds are inclusive.
    The result is ordered most recent first; transactions sharing a date keep
    their input order, invoices before expenses.

    Args:
        invoices: Source invoices
        expenses: Source expenses
        start_date: Optional first day of the period
        end_date: Optional last day of the period
        kind: Optional filter to income or expense transactions only

    Returns:
        List of transactions, newest first
    """
    period = DateRange(start_date, end_date)

    transactions: list[Transaction] = []
    if kind in (None, TransactionKind.INCOME):
        transactions.extend(
            invoice_to_transaction(invoice)
            for invoice in invoices
            if invoice.status != InvoiceStatus.VOIDED
        )
    if kind in (None, TransactionKind.EXPENSE):
        transactions.extend(expense_to_transaction(expense) for expense in expenses)

    transactions = [txn for txn in transactions if period.contains(txn.date)]
    logger.debug(
        "Normalized %d transactions between %s and %s", len(transactions), start_date, end_date
    )
    return sorted(transactions, key=lambda txn: txn.date, reverse=True)


def summarize_transactions(transactions: Sequence[Transaction]) -> TransactionTotals:
    """Total income and expense amounts of a transaction list."""
    income = sum(
        (txn.amount for txn in transactions if txn.kind == TransactionKind.INCOME), ZERO
    )
    expense = sum(
        (txn.amount for txn in transactions if txn.kind == TransactionKind.EXPENSE), ZERO
    )
    return TransactionTotals(income=income, expense=expense)
