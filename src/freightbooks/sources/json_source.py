"""JSON snapshot implementation of the record source."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from freightbooks.domain.entities import CompanyConfig, Expense, Invoice, PaymentMethod
from freightbooks.domain.errors import (
    NotFoundError,
    ValidationError,
    data_file_not_found,
    invalid_data_file,
)
from freightbooks.sources.base import RecordSource
from freightbooks.sources.mappers import (
    company_config_to_domain,
    expense_to_domain,
    invoice_to_domain,
    payment_method_to_domain,
)

logger = logging.getLogger(__name__)


class JsonRecordSource(RecordSource):
    """Record source backed by a JSON export of the back-office API.

    The snapshot is an object with ``companyInfo``, ``invoices``, ``expenses``
    and ``paymentMethods`` keys, each holding the payloads exactly as the API
    serves them. It is read lazily on first access.
    """

    def __init__(self, data_path: Path):
        """Initialize JSON record source.

        Args:
            data_path: Path to the JSON snapshot file
        """
        self.data_path = Path(data_path)
        self._payload: Optional[dict[str, Any]] = None

    def _get_payload(self) -> dict[str, Any]:
        """Get the loaded snapshot, reading it if needed."""
        if self._payload is None:
            self._payload = self._read_payload()
        return self._payload

    def _read_payload(self) -> dict[str, Any]:
        if not self.data_path.exists():
            raise NotFoundError(data_file_not_found(str(self.data_path)))

        try:
            with self.data_path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(invalid_data_file(str(self.data_path), str(e)))

        if not isinstance(payload, dict):
            raise ValidationError(invalid_data_file(str(self.data_path), "expected a JSON object"))

        logger.info(
            "Loaded snapshot %s: %d invoices, %d expenses",
            self.data_path,
            len(payload.get("invoices") or []),
            len(payload.get("expenses") or []),
        )
        return payload

    def connect(self) -> None:
        """Connect to the source."""
        # Loading is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Drop the loaded snapshot."""
        self._payload = None

    def get_company_config(self) -> CompanyConfig:
        return company_config_to_domain(self._get_payload().get("companyInfo"))

    def list_invoices(self) -> list[Invoice]:
        return [invoice_to_domain(item) for item in self._get_payload().get("invoices") or []]

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        for item in self._get_payload().get("invoices") or []:
            if str(item.get("id")) == invoice_id:
                return invoice_to_domain(item)
        return None

    def list_expenses(self) -> list[Expense]:
        return [expense_to_domain(item) for item in self._get_payload().get("expenses") or []]

    def list_payment_methods(self) -> list[PaymentMethod]:
        return [
            payment_method_to_domain(item)
            for item in self._get_payload().get("paymentMethods") or []
        ]
