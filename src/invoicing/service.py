"""Public entry point for applying payments to invoices."""

from __future__ import annotations

from loguru import logger

from .graph.state import PaymentState
from .graph.workflow import build_workflow
from .models import Payment, PaymentResult
from .repository import InvoiceRepository


class InvoiceService:
    """Applies payments to the invoices held by a repository.

    The invoice is changed in place; saving it is left to the caller.
    """

    def __init__(self, repository: InvoiceRepository) -> None:
        self._repository = repository
        self._workflow = build_workflow(repository)

    def process_payment(self, payment: Payment) -> PaymentResult:
        """Apply ``payment`` to its invoice and describe the outcome.

        Raises ``InvoiceNotFoundError`` when the reference matches no invoice
        and ``UnknownInvoiceTypeError`` when the invoice type has no tax rate.
        """

        logger.debug("Processing payment of {} for {}", payment.amount, payment.reference)
        state: PaymentState = {"payment": payment}
        result = self._workflow.invoke(state)  # type: ignore[arg-type]
        return result["result"]
