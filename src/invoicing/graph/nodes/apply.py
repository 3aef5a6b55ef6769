"""Recording a payment on an invoice."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from ...errors import UnknownInvoiceTypeError
from ...models import Invoice, InvoiceType, Payment
from ..state import PaymentState

TAX_RATES: dict[InvoiceType, Decimal] = {
    InvoiceType.STANDARD: Decimal("0.14"),
    InvoiceType.COMMERCIAL: Decimal("0.14"),
}


def apply_payment(invoice: Invoice, payment: Payment) -> None:
    """Add ``payment`` to the invoice totals and history.

    Raises ``UnknownInvoiceTypeError`` before any field is changed when the
    invoice type has no tax rate.
    """

    try:
        rate = TAX_RATES[invoice.type]
    except KeyError:
        raise UnknownInvoiceTypeError() from None

    invoice.amount_paid += payment.amount
    invoice.tax_amount += payment.amount * rate
    if invoice.payments is None:
        invoice.payments = []
    invoice.payments.append(payment)


def handle_apply(state: PaymentState) -> PaymentState:
    """Apply the payment regardless of the status derived for it."""

    invoice = state["invoice"]
    payment = state["payment"]
    apply_payment(invoice, payment)
    logger.info(
        "Applied {} to invoice {}: paid {} of {}, tax {}",
        payment.amount,
        invoice.reference,
        invoice.amount_paid,
        invoice.amount,
        invoice.tax_amount,
    )
    return {"invoice": invoice}
