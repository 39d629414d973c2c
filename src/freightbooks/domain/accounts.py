"""Typed keys for the implicit chart of accounts.

Accounts are discovered from the journal rather than declared up front. Fixed
system accounts are enum members; accounts named after a client, supplier,
expense category or payment method are parametrized keys. Every key renders to
the plain account name the ledger groups by.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Union

from freightbooks.domain.entities import PaymentMethod


class SystemAccount(StrEnum):
    FREIGHT_INCOME = "Freight Income"
    HANDLING_INCOME = "Handling Income"
    INSURANCE_INCOME = "Insurance Income"
    SALES_DISCOUNTS = "Sales Discounts"
    VAT_PAYABLE = "VAT Payable"
    POSTAL_LEVY_PAYABLE = "Postal Levy Payable"
    FX_TAX_PAYABLE = "FX Tax Payable"
    VAT_CREDIT = "VAT Credit"
    CASH_BANK = "Cash/Bank"


@dataclass(frozen=True)
class ReceivableAccount:
    client: str

    @property
    def name(self) -> str:
        return f"Accounts Receivable - {self.client}"


@dataclass(frozen=True)
class PayableAccount:
    supplier: str

    @property
    def name(self) -> str:
        return f"Accounts Payable - {self.supplier}"


@dataclass(frozen=True)
class ExpenseAccount:
    category: str

    @property
    def name(self) -> str:
        return f"Expense - {self.category}"


@dataclass(frozen=True)
class PaymentMethodAccount:
    label: str

    @property
    def name(self) -> str:
        return self.label


AccountKey = Union[
    SystemAccount, ReceivableAccount, PayableAccount, ExpenseAccount, PaymentMethodAccount
]


def account_name(key: AccountKey) -> str:
    """Render an account key to the name used for ledger grouping."""
    if isinstance(key, SystemAccount):
        return key.value
    return key.name


def resolve_payment_account(
    payment_method_id: Optional[str], payment_methods: dict[str, PaymentMethod]
) -> AccountKey:
    """Resolve a payment method reference to its account.

    Falls back to the generic cash/bank account when the reference is missing
    or does not match a known payment method.
    """
    if payment_method_id:
        method = payment_methods.get(payment_method_id)
        if method is not None and method.name:
            return PaymentMethodAccount(method.name)
    return SystemAccount.CASH_BANK
