"""Abstract record source interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from freightbooks.domain.entities import (
    CompanyConfig,
    Expense,
    Invoice,
    PaymentMethod,
)


class RecordSource(ABC):
    """Read-only access to the records served by the back-office API."""

    @abstractmethod
    def connect(self) -> None:
        """Open the source."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the source and drop any loaded records."""
        pass

    @abstractmethod
    def get_company_config(self) -> CompanyConfig:
        """Get the current company configuration."""
        pass

    @abstractmethod
    def list_invoices(self) -> list[Invoice]:
        """List all invoices, voided ones included."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        """List all expenses."""
        pass

    @abstractmethod
    def list_payment_methods(self) -> list[PaymentMethod]:
        """List configured payment methods."""
        pass
