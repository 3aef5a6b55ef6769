"""Exceptions raised while applying payments to invoices."""

INVOICE_NOT_FOUND = "There is no invoice matching this payment"


class InvoicingError(Exception):
    """Base class for invoicing failures."""


class InvalidOperationError(InvoicingError, RuntimeError):
    """The requested operation cannot run against the current data."""


class InvoiceNotFoundError(InvalidOperationError):
    """No invoice matches the payment reference."""

    def __init__(self, message: str = INVOICE_NOT_FOUND) -> None:
        super().__init__(message)


class UnknownInvoiceTypeError(InvoicingError, ValueError):
    """The invoice carries a type outside the known variants."""
