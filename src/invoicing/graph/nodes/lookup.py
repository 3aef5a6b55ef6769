"""Invoice lookup and routing nodes."""

from __future__ import annotations

from typing import Callable, Literal

from loguru import logger

from ...errors import InvoiceNotFoundError
from ...models import PaymentResult, PaymentStatus
from ...repository import InvoiceRepository
from ..state import PaymentState


def make_lookup_node(repository: InvoiceRepository) -> Callable[[PaymentState], PaymentState]:
    """Bind the invoice lookup node to a repository."""

    def lookup_invoice(state: PaymentState) -> PaymentState:
        reference = state["payment"].reference
        invoice = repository.get_invoice(reference)
        if invoice is None:
            logger.warning("No invoice found for reference {}", reference)
            raise InvoiceNotFoundError()
        logger.debug("Found invoice {} ({})", reference, invoice.type)
        return {"invoice": invoice}

    return lookup_invoice


def route_invoice(state: PaymentState) -> Literal["zero_amount", "describe"]:
    """Invoices with nothing to pay skip the payment entirely."""

    invoice = state["invoice"]
    if invoice is not None and invoice.amount == 0:
        logger.debug("Routing invoice {}: zero amount", invoice.reference)
        return "zero_amount"
    return "describe"


def handle_zero_amount(state: PaymentState) -> PaymentState:
    """Report on an invoice that has an amount of 0 without touching it."""

    invoice = state["invoice"]
    if not invoice.has_payments:
        return {"result": PaymentResult.of(PaymentStatus.NO_PAYMENT_NEEDED)}
    logger.warning("Invoice {} has an amount of 0 but carries payments", invoice.reference)
    return {"result": PaymentResult.of(PaymentStatus.INVALID_STATE)}
