"""Domain model entities for freightbooks.

These are pure data classes representing business concepts, independent of
how the backend stores or serves them. Source records (invoices, expenses,
configuration) come in from the record source; everything else is a derived
projection rebuilt on every read.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Optional, Union


ZERO = Decimal("0")


class PaymentMode(StrEnum):
    """Who pays the freight: the sender at issuance or the receiver on delivery."""

    PREPAID = "prepaid"
    COLLECT = "collect"


class Currency(StrEnum):
    LOCAL = "local"
    FOREIGN = "foreign"


class InvoiceStatus(StrEnum):
    ACTIVE = "active"
    VOIDED = "voided"


class PaymentStatus(StrEnum):
    PAID = "paid"
    PENDING = "pending"


class ShippingStatus(StrEnum):
    PENDING = "pending"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"


class ExpenseStatus(StrEnum):
    PAID = "paid"
    PENDING = "pending"


class TransactionKind(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class CargoItem:
    """One line of merchandise in a shipping manifest."""

    quantity: int
    real_weight: Decimal
    length: Decimal
    width: Decimal
    height: Decimal
    category_id: Optional[str] = None
    description: str = ""


@dataclass(frozen=True)
class ShippingManifest:
    """Cargo and pricing options of a shipment (the invoice's guide)."""

    items: tuple[CargoItem, ...] = ()
    payment_mode: PaymentMode = PaymentMode.PREPAID
    currency: Currency = Currency.LOCAL
    has_insurance: bool = False
    declared_value: Decimal = ZERO
    insurance_percent: Decimal = ZERO
    has_discount: bool = False
    discount_percent: Decimal = ZERO
    payment_method_id: Optional[str] = None


@dataclass(frozen=True)
class CompanyConfig:
    """Company configuration snapshot.

    ``bcv_rate`` is the official exchange rate; it is informational only and
    never read by the calculator.
    """

    cost_per_kg: Decimal
    bcv_rate: Decimal = ZERO
    name: str = ""
    rif: str = ""


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    name: str


@dataclass(frozen=True)
class Invoice:
    """Sales invoice as served by the backend."""

    id: str
    date: date
    status: InvoiceStatus
    payment_status: PaymentStatus
    total_amount: Decimal
    client_name: str
    guide: ShippingManifest
    invoice_number: str = ""
    control_number: str = ""
    client_id_number: str = ""
    shipping_status: ShippingStatus = ShippingStatus.PENDING


@dataclass(frozen=True)
class Expense:
    """Purchase expense as served by the backend.

    ``amount`` is the gross total, including the VAT credit component.
    """

    id: str
    date: date
    status: ExpenseStatus
    amount: Decimal
    category: str
    supplier_name: str = ""
    taxable_base: Optional[Decimal] = None
    vat_amount: Decimal = ZERO
    supplier_rif: str = ""
    invoice_number: str = ""
    control_number: str = ""
    description: str = ""
    payment_method_id: Optional[str] = None


@dataclass(frozen=True)
class Financials:
    """Complete financial breakdown of a shipment."""

    freight: Decimal = ZERO
    insurance_cost: Decimal = ZERO
    handling: Decimal = ZERO
    discount: Decimal = ZERO
    subtotal: Decimal = ZERO
    postal_levy: Decimal = ZERO
    vat: Decimal = ZERO
    fx_tax: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class ItemTaxAllocation:
    """Share of the invoice-level VAT and postal levy carried by one cargo item."""

    vat: Decimal = ZERO
    postal_levy: Decimal = ZERO


@dataclass(frozen=True)
class Transaction:
    """Uniform view over an invoice or an expense."""

    id: str
    date: date
    kind: TransactionKind
    amount: Decimal
    status: str
    description: str
    source: Union[Invoice, Expense]


@dataclass(frozen=True)
class TransactionTotals:
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class JournalEntryLine:
    """One debit or credit movement; the unused side is zero."""

    account_name: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry (asiento) synthesized from one transaction."""

    id: str
    date: date
    description: str
    lines: tuple[JournalEntryLine, ...] = ()

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), ZERO)


@dataclass(frozen=True)
class LedgerLine:
    date: date
    description: str
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class LedgerAccount:
    """Chronological roll-up of every journal line posted to one account."""

    account_name: str
    entries: tuple[LedgerLine, ...] = ()
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO
    final_balance: Decimal = ZERO


@dataclass(frozen=True)
class SalesBookRow:
    date: date
    invoice_number: str
    control_number: str
    client_name: str
    client_id_number: str
    total: Decimal
    base: Decimal
    vat: Decimal
    postal_levy: Decimal
    voided: bool = False


@dataclass(frozen=True)
class PurchasesBookRow:
    date: date
    invoice_number: str
    control_number: str
    supplier_name: str
    supplier_rif: str
    total: Decimal
    base: Decimal
    vat: Decimal


@dataclass(frozen=True)
class SalesBook:
    rows: tuple[SalesBookRow, ...] = ()
    total: Decimal = ZERO
    base: Decimal = ZERO
    vat: Decimal = ZERO
    postal_levy: Decimal = ZERO


@dataclass(frozen=True)
class PurchasesBook:
    rows: tuple[PurchasesBookRow, ...] = ()
    total: Decimal = ZERO
    base: Decimal = ZERO
    vat: Decimal = ZERO


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-day range; either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


@dataclass(frozen=True)
class AccountingSnapshot:
    """Source records read from the record source for one report request."""

    config: CompanyConfig
    invoices: tuple[Invoice, ...] = ()
    expenses: tuple[Expense, ...] = ()
    payment_methods: tuple[PaymentMethod, ...] = ()
