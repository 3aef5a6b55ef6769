"""Status message derivation."""

from __future__ import annotations

from loguru import logger

from ...errors import InvoiceNotFoundError
from ...models import Invoice, Payment, PaymentResult, PaymentStatus
from ..state import PaymentState

# Statuses that are reported but do not stop the payment from being recorded.
_ANOMALIES = {
    PaymentStatus.ALREADY_PAID,
    PaymentStatus.EXCEEDS_REMAINING,
    PaymentStatus.EXCEEDS_AMOUNT,
}


def describe_payment(invoice: Invoice | None, payment: Payment) -> PaymentResult:
    """Describe what applying ``payment`` means for ``invoice``.

    Pure: the invoice is only read. All comparisons are exact ``Decimal``
    comparisons.
    """

    if invoice is None:
        raise InvoiceNotFoundError()

    if invoice.has_payments:
        paid = invoice.payments_total
        if paid != 0 and paid == invoice.amount:
            status = PaymentStatus.ALREADY_PAID
        elif paid != 0 and payment.amount > invoice.remaining:
            status = PaymentStatus.EXCEEDS_REMAINING
        elif invoice.remaining == payment.amount:
            status = PaymentStatus.FINAL_PARTIAL
        else:
            status = PaymentStatus.ANOTHER_PARTIAL
    elif payment.amount > invoice.amount:
        status = PaymentStatus.EXCEEDS_AMOUNT
    elif payment.amount == invoice.amount:
        status = PaymentStatus.FULLY_PAID
    else:
        status = PaymentStatus.PARTIALLY_PAID

    return PaymentResult.of(status)


def handle_describe(state: PaymentState) -> PaymentState:
    """Attach the status of the incoming payment to the state."""

    invoice = state.get("invoice")
    result = describe_payment(invoice, state["payment"])
    if result.status in _ANOMALIES:
        logger.warning("Invoice {}: {}", invoice.reference, result.message)
    else:
        logger.debug("Invoice {}: {}", invoice.reference, result.message)
    return {"result": result}
