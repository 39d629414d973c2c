"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record or data file does not exist."""


def invoice_not_found(invoice_id: str) -> str:
    """Return message for missing invoice."""
    return f"Invoice {invoice_id} not found"


def voided_invoice_entry(invoice_number: str) -> str:
    """Return message when a journal entry is requested for a voided invoice."""
    return f"Invoice {invoice_number} is voided and cannot be posted to the journal"


def data_file_not_found(path: str) -> str:
    """Return message for a missing record snapshot."""
    return f"Data file '{path}' not found"


def invalid_data_file(path: str, reason: str) -> str:
    """Return message for an unreadable record snapshot."""
    return f"Data file '{path}' is not a valid snapshot: {reason}"
