"""Domain layer for freightbooks: the accounting derivation engine."""

from freightbooks.domain.financials import calculate_financial_details, allocate_item_taxes
from freightbooks.domain.transactions import normalize_transactions, summarize_transactions
from freightbooks.domain.journal import JournalGenerator, build_journal
from freightbooks.domain.ledger import build_ledger, build_subsidiary_ledger
from freightbooks.domain.fiscal_books import build_sales_book, build_purchases_book
from freightbooks.domain.reports import AccountingService

__all__ = [
    "calculate_financial_details",
    "allocate_item_taxes",
    "normalize_transactions",
    "summarize_transactions",
    "JournalGenerator",
    "build_journal",
    "build_ledger",
    "build_subsidiary_ledger",
    "build_sales_book",
    "build_purchases_book",
    "AccountingService",
]
