# ruff: noqa: S101
import json
from decimal import Decimal
from pathlib import Path

from invoicing.models import Invoice, InvoiceType
from invoicing.repository import InMemoryInvoiceRepository


def test_get_invoice_returns_same_object() -> None:
    invoice = Invoice(reference="INV-1", amount=Decimal("10"))
    repo = InMemoryInvoiceRepository([invoice])
    assert repo.get_invoice("INV-1") is invoice
    assert repo.get_invoice("INV-2") is None


def test_add_replaces_by_reference() -> None:
    repo = InMemoryInvoiceRepository([Invoice(reference="INV-1", amount=Decimal("10"))])
    updated = Invoice(reference="INV-1", amount=Decimal("20"))
    repo.add(updated)
    assert repo.get_invoice("INV-1") is updated


def test_from_json(tmp_path: Path) -> None:
    path = tmp_path / "invoices.json"
    path.write_text(
        json.dumps(
            [
                {"reference": "A", "amount": "12.50", "type": "Commercial"},
                {"reference": "B", "amount": 0.1, "payments": None},
            ]
        )
    )

    repo = InMemoryInvoiceRepository.from_json(path)

    first = repo.get_invoice("A")
    second = repo.get_invoice("B")
    assert first.amount == Decimal("12.50")
    assert first.type is InvoiceType.COMMERCIAL
    assert first.payments == []
    assert second.amount == Decimal("0.1")
    assert second.payments is None
