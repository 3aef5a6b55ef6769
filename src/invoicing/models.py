"""Invoice, payment and result models."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def _to_decimal(value: object) -> object:
    """Convert floats through str() so 0.1 stays Decimal("0.1")."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class InvoiceType(str, Enum):
    """Invoice variants; each has a tax rate."""

    STANDARD = "Standard"
    COMMERCIAL = "Commercial"


class Payment(BaseModel):
    """A monetary amount applied against the invoice named by ``reference``."""

    reference: str
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: object) -> object:
        """Read float amounts exactly."""
        return _to_decimal(value)


class Invoice(BaseModel):
    """Billable record with running paid and tax totals.

    ``amount_paid`` is not clamped to ``amount``: overpayments are reported
    by the processor but still recorded.
    """

    reference: str
    amount: Decimal
    amount_paid: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    type: InvoiceType = InvoiceType.STANDARD
    payments: list[Payment] | None = Field(default_factory=list)

    @field_validator("amount", "amount_paid", "tax_amount", mode="before")
    @classmethod
    def coerce_money(cls, value: object) -> object:
        """Read float money values exactly."""
        return _to_decimal(value)

    @property
    def has_payments(self) -> bool:
        """Whether any payment has been recorded."""
        return bool(self.payments)

    @property
    def payments_total(self) -> Decimal:
        """Sum of the recorded payment amounts."""
        return sum((p.amount for p in self.payments or []), Decimal("0"))

    @property
    def remaining(self) -> Decimal:
        """Amount still due according to ``amount_paid``."""
        return self.amount - self.amount_paid


class PaymentStatus(str, Enum):
    """Outcome kind of processing one payment."""

    NO_PAYMENT_NEEDED = "no_payment_needed"
    INVALID_STATE = "invalid_state"
    ALREADY_PAID = "already_paid"
    EXCEEDS_REMAINING = "exceeds_remaining"
    FINAL_PARTIAL = "final_partial"
    ANOTHER_PARTIAL = "another_partial"
    EXCEEDS_AMOUNT = "exceeds_amount"
    FULLY_PAID = "fully_paid"
    PARTIALLY_PAID = "partially_paid"


# Message texts are relied on by existing callers; keep them verbatim.
STATUS_MESSAGES: dict[PaymentStatus, str] = {
    PaymentStatus.NO_PAYMENT_NEEDED: "no payment needed",
    PaymentStatus.INVALID_STATE: (
        "The invoice is in an invalid state, it has an amount of 0 and it has payments."
    ),
    PaymentStatus.ALREADY_PAID: "invoice was already fully paid",
    PaymentStatus.EXCEEDS_REMAINING: "the payment is greater than the partial amount remaining",
    PaymentStatus.FINAL_PARTIAL: "final partial payment received, invoice is now fully paid",
    PaymentStatus.ANOTHER_PARTIAL: "another partial payment received, still not fully paid",
    PaymentStatus.EXCEEDS_AMOUNT: "the payment is greater than the invoice amount",
    PaymentStatus.FULLY_PAID: "invoice is now fully paid",
    PaymentStatus.PARTIALLY_PAID: "invoice is now partially paid",
}


class PaymentResult(BaseModel):
    """Tagged result of processing a payment."""

    status: PaymentStatus
    message: str

    model_config = {"frozen": True}

    @classmethod
    def of(cls, status: PaymentStatus) -> PaymentResult:
        """Build the result for ``status`` with its fixed message."""
        return cls(status=status, message=STATUS_MESSAGES[status])

    def __str__(self) -> str:
        return self.message
