"""Journal entry generation.

Synthesizes one double-entry journal entry per transaction. Income entries are
built from the financial breakdown recomputed from the invoice's manifest;
expense entries from the amounts recorded on the expense.
"""

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from freightbooks.domain.accounts import (
    AccountKey,
    ExpenseAccount,
    PayableAccount,
    ReceivableAccount,
    SystemAccount,
    account_name,
    resolve_payment_account,
)
from freightbooks.domain.entities import (
    ZERO,
    CompanyConfig,
    Expense,
    ExpenseStatus,
    Invoice,
    InvoiceStatus,
    JournalEntry,
    JournalEntryLine,
    PaymentMethod,
    PaymentMode,
    PaymentStatus,
    Transaction,
    TransactionKind,
)
from freightbooks.domain.errors import ValidationError, voided_invoice_entry
from freightbooks.domain.financials import calculate_financial_details
from freightbooks.utils.amount_parser import coerce_amount

logger = logging.getLogger(__name__)


def debit(account: AccountKey, amount: Decimal) -> JournalEntryLine:
    return JournalEntryLine(account_name=account_name(account), debit=amount, credit=ZERO)


def credit(account: AccountKey, amount: Decimal) -> JournalEntryLine:
    return JournalEntryLine(account_name=account_name(account), debit=ZERO, credit=amount)


class JournalGenerator:
    """Builds journal entries for transactions.

    The company configuration and payment methods are snapshots taken by the
    caller; the generator never reads them from anywhere else.
    """

    def __init__(
        self, config: CompanyConfig, payment_methods: Iterable[PaymentMethod] = ()
    ):
        """Initialize journal generator.

        Args:
            config: Company configuration snapshot used to recompute invoice financials
            payment_methods: Payment methods used to name cash/bank accounts
        """
        self.config = config
        self.payment_methods = {method.id: method for method in payment_methods}

    def generate_entry(self, txn: Transaction) -> JournalEntry:
        """Build the journal entry for one transaction.

        Raises:
            ValidationError: If the transaction belongs to a voided invoice
        """
        if txn.kind == TransactionKind.INCOME:
            return self.income_entry(txn.id, txn.source)
        return self.expense_entry(txn.id, txn.source)

    def generate_entries(self, transactions: Iterable[Transaction]) -> list[JournalEntry]:
        """Build entries for every postable transaction, in input order.

        Transactions of voided invoices are skipped.
        """
        entries = []
        for txn in transactions:
            if txn.kind == TransactionKind.INCOME and txn.source.status == InvoiceStatus.VOIDED:
                continue
            entries.append(self.generate_entry(txn))
        logger.debug("Generated %d journal entries", len(entries))
        return entries

    def income_entry(self, entry_id: str, invoice: Invoice) -> JournalEntry:
        """Build the sale entry for an invoice.

        A paid prepaid invoice is debited straight to the payment account;
        anything else is debited to the client's receivable. A paid
        collect-on-delivery invoice additionally carries the settlement pair
        (debit payment account, credit receivable) in the same entry, so the
        receivable opened by the sale is closed again within the entry.
        """
        if invoice.status == InvoiceStatus.VOIDED:
            raise ValidationError(voided_invoice_entry(invoice.invoice_number or invoice.id))

        financials = calculate_financial_details(invoice.guide, self.config)
        payment_account = resolve_payment_account(
            invoice.guide.payment_method_id, self.payment_methods
        )
        receivable = ReceivableAccount(invoice.client_name)
        is_paid = invoice.payment_status == PaymentStatus.PAID
        payment_mode = invoice.guide.payment_mode

        lines = []
        if is_paid and payment_mode == PaymentMode.PREPAID:
            lines.append(debit(payment_account, financials.total))
        else:
            lines.append(debit(receivable, financials.total))

        if is_paid and payment_mode == PaymentMode.COLLECT:
            lines.append(debit(payment_account, financials.total))
            lines.append(credit(receivable, financials.total))

        lines.append(credit(SystemAccount.FREIGHT_INCOME, financials.freight))
        lines.append(credit(SystemAccount.HANDLING_INCOME, financials.handling))
        if financials.insurance_cost > 0:
            lines.append(credit(SystemAccount.INSURANCE_INCOME, financials.insurance_cost))
        if financials.discount > 0:
            lines.append(debit(SystemAccount.SALES_DISCOUNTS, financials.discount))
        if financials.vat > 0:
            lines.append(credit(SystemAccount.VAT_PAYABLE, financials.vat))
        if financials.postal_levy > 0:
            lines.append(credit(SystemAccount.POSTAL_LEVY_PAYABLE, financials.postal_levy))
        if financials.fx_tax > 0:
            lines.append(credit(SystemAccount.FX_TAX_PAYABLE, financials.fx_tax))

        return JournalEntry(
            id=entry_id,
            date=invoice.date,
            description=f"Sale per Invoice {invoice.invoice_number}",
            lines=tuple(lines),
        )

    def expense_entry(self, entry_id: str, expense: Expense) -> JournalEntry:
        """Build the purchase entry for an expense.

        The expense account takes the taxable base, or the full amount when no
        base was recorded; any VAT goes to the VAT credit account. The gross
        amount is credited to the payment account when paid, otherwise to the
        supplier's payable.
        """
        amount = coerce_amount(expense.amount)
        vat_amount = coerce_amount(expense.vat_amount)
        taxable_base = amount if expense.taxable_base is None else coerce_amount(expense.taxable_base)

        lines = [debit(ExpenseAccount(expense.category), taxable_base)]
        if vat_amount > 0:
            lines.append(debit(SystemAccount.VAT_CREDIT, vat_amount))

        if expense.status == ExpenseStatus.PAID:
            payment_account = resolve_payment_account(
                expense.payment_method_id, self.payment_methods
            )
            lines.append(credit(payment_account, amount))
        else:
            lines.append(credit(PayableAccount(expense.supplier_name), amount))

        return JournalEntry(
            id=entry_id,
            date=expense.date,
            description=f"Purchase per Invoice {expense.invoice_number} from {expense.supplier_name}",
            lines=tuple(lines),
        )


def build_journal(
    transactions: Iterable[Transaction],
    config: CompanyConfig,
    payment_methods: Iterable[PaymentMethod] = (),
) -> list[JournalEntry]:
    """Build the journal book: entries in ascending date order.

    Entries sharing a date keep the order of the incoming transactions.
    """
    entries = JournalGenerator(config, payment_methods).generate_entries(transactions)
    return sorted(entries, key=lambda entry: entry.date)


def is_balanced(entry: JournalEntry) -> bool:
    return entry.total_debit == entry.total_credit


def journal_totals(entries: Sequence[JournalEntry]) -> tuple[Decimal, Decimal]:
    """Grand total of debits and credits across a journal."""
    total_debit = sum((entry.total_debit for entry in entries), ZERO)
    total_credit = sum((entry.total_credit for entry in entries), ZERO)
    return total_debit, total_credit


def find_unbalanced(entries: Sequence[JournalEntry]) -> list[JournalEntry]:
    """Entries whose debits and credits differ."""
    unbalanced = [entry for entry in entries if not is_balanced(entry)]
    if unbalanced:
        logger.warning("%d journal entries are unbalanced", len(unbalanced))
    return unbalanced
