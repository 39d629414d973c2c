"""Accounting report service.

Reads source records from a record source and runs them through the engine.
Every call reloads the records and recomputes every projection; nothing
derived is kept between calls.
"""

import dataclasses
import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from freightbooks.domain.entities import (
    AccountingSnapshot,
    Financials,
    ItemTaxAllocation,
    Invoice,
    JournalEntry,
    LedgerAccount,
    PurchasesBook,
    SalesBook,
    Transaction,
    TransactionKind,
)
from freightbooks.domain.errors import NotFoundError, invoice_not_found
from freightbooks.domain.financials import (
    allocate_item_taxes,
    calculate_chargeable_weight,
    calculate_financial_details,
)
from freightbooks.domain.fiscal_books import build_purchases_book, build_sales_book
from freightbooks.domain.journal import build_journal
from freightbooks.domain.ledger import build_ledger, build_subsidiary_ledger, list_accounts
from freightbooks.domain.transactions import normalize_transactions

if TYPE_CHECKING:
    from freightbooks.sources.base import RecordSource

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class InvoiceFinancials:
    """Financial breakdown of one invoice, as shown on the invoice detail."""

    invoice: Invoice
    financials: Financials
    chargeable_weight: Decimal
    item_taxes: tuple[ItemTaxAllocation, ...]


class AccountingService:
    """Service for building accounting reports from source records."""

    def __init__(self, source: "RecordSource", cost_per_kg: Optional[Decimal] = None):
        """Initialize accounting service.

        Args:
            source: Record source serving invoices, expenses and configuration
            cost_per_kg: Optional rate overriding the configured cost per kg
        """
        self.source = source
        self.cost_per_kg = cost_per_kg

    def load_snapshot(self) -> AccountingSnapshot:
        """Read the source records needed by the reports."""
        config = self.source.get_company_config()
        if self.cost_per_kg is not None:
            config = dataclasses.replace(config, cost_per_kg=self.cost_per_kg)

        return AccountingSnapshot(
            config=config,
            invoices=tuple(self.source.list_invoices()),
            expenses=tuple(self.source.list_expenses()),
            payment_methods=tuple(self.source.list_payment_methods()),
        )

    def get_invoice_financials(self, invoice_id: str) -> InvoiceFinancials:
        """Compute the financial breakdown of one invoice.

        Raises:
            NotFoundError: If the invoice doesn't exist
        """
        invoice = self.source.get_invoice(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_not_found(invoice_id))

        config = self.load_snapshot().config
        financials = calculate_financial_details(invoice.guide, config)
        return InvoiceFinancials(
            invoice=invoice,
            financials=financials,
            chargeable_weight=calculate_chargeable_weight(invoice.guide),
            item_taxes=tuple(allocate_item_taxes(invoice.guide, config, financials)),
        )

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[TransactionKind] = None,
    ) -> list[Transaction]:
        """List transactions for a period, newest first."""
        snapshot = self.load_snapshot()
        return normalize_transactions(
            snapshot.invoices, snapshot.expenses, start_date=start_date, end_date=end_date, kind=kind
        )

    def get_journal(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[JournalEntry]:
        """Build journal entries for a period, oldest first."""
        snapshot = self.load_snapshot()
        transactions = normalize_transactions(
            snapshot.invoices, snapshot.expenses, start_date=start_date, end_date=end_date
        )
        return build_journal(transactions, snapshot.config, snapshot.payment_methods)

    def get_general_ledger(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> dict[str, LedgerAccount]:
        """Build the general ledger for a period."""
        return build_ledger(self.get_journal(start_date, end_date))

    def get_subsidiary_ledger(
        self,
        account_name: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> LedgerAccount:
        """Build the ledger of a single account for a period."""
        return build_subsidiary_ledger(self.get_journal(start_date, end_date), account_name)

    def list_accounts(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[str]:
        """List account names used by the journal of a period."""
        return list_accounts(self.get_journal(start_date, end_date))

    def get_sales_book(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> SalesBook:
        """Build the sales book for a period."""
        snapshot = self.load_snapshot()
        return build_sales_book(snapshot.invoices, snapshot.config, start_date, end_date)

    def get_purchases_book(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> PurchasesBook:
        """Build the purchases book for a period."""
        snapshot = self.load_snapshot()
        return build_purchases_book(snapshot.expenses, start_date, end_date)
