from decimal import Decimal

import pytest

from invoicing.models import Invoice, InvoiceType, Payment
from invoicing.repository import InMemoryInvoiceRepository


class RecordingRepository(InMemoryInvoiceRepository):
    """In-memory repository that remembers every call made to it."""

    def __init__(self, invoices: list[Invoice] | None = None) -> None:
        super().__init__(invoices)
        self.calls: list[tuple[str, str]] = []

    def get_invoice(self, reference: str) -> Invoice | None:
        self.calls.append(("get_invoice", reference))
        return super().get_invoice(reference)


@pytest.fixture
def repository() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def standard_invoice() -> Invoice:
    return Invoice(reference="INV-1", amount=Decimal("100"), type=InvoiceType.STANDARD)


@pytest.fixture
def partly_paid_commercial() -> Invoice:
    first = Payment(reference="INV-2", amount=Decimal("50"))
    return Invoice(
        reference="INV-2",
        amount=Decimal("100"),
        amount_paid=Decimal("50"),
        tax_amount=Decimal("7"),
        type=InvoiceType.COMMERCIAL,
        payments=[first],
    )
