"""Typed state passed between payment workflow nodes."""

from typing import TypedDict

from ..models import Invoice, Payment, PaymentResult


class PaymentState(TypedDict, total=False):
    """Represents data shared across workflow nodes."""

    payment: Payment
    invoice: Invoice | None
    result: PaymentResult
