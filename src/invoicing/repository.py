"""Invoice lookup collaborators."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from loguru import logger
from pydantic import TypeAdapter

from .models import Invoice

_INVOICE_LIST = TypeAdapter(list[Invoice])


class InvoiceRepository(Protocol):
    """Anything able to return an invoice by its reference."""

    def get_invoice(self, reference: str) -> Invoice | None: ...


class InMemoryInvoiceRepository:
    """Dict-backed repository used by the CLI and tests.

    Invoices are returned by identity, so changes made while processing a
    payment are visible to whoever holds the same object.
    """

    def __init__(self, invoices: list[Invoice] | None = None) -> None:
        self._invoices: dict[str, Invoice] = {}
        for invoice in invoices or []:
            self.add(invoice)

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryInvoiceRepository:
        """Load a JSON array of invoices."""

        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        invoices = _INVOICE_LIST.validate_python(raw)
        logger.debug("Loaded {} invoices from {}", len(invoices), path)
        return cls(invoices)

    def get_invoice(self, reference: str) -> Invoice | None:
        """Return the stored invoice for ``reference``, if any."""
        return self._invoices.get(reference)

    def add(self, invoice: Invoice) -> None:
        """Insert or replace an invoice by its reference."""
        self._invoices[invoice.reference] = invoice
