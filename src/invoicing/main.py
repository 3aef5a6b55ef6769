"""Command line entry point for applying a payment to an invoice."""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from invoicing.errors import InvoicingError
from invoicing.log import configure_logging
from invoicing.models import Payment
from invoicing.repository import InMemoryInvoiceRepository
from invoicing.service import InvoiceService
from invoicing.settings import Settings

app = typer.Typer()


def _parse_amount(value: str) -> Decimal:
    """Read a finite decimal amount from the command line."""

    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"not a decimal amount: {value}", param_hint="AMOUNT") from None
    if not amount.is_finite():
        raise typer.BadParameter(f"not a finite amount: {value}", param_hint="AMOUNT")
    return amount


def _load_invoices(path: Path) -> InMemoryInvoiceRepository:
    """Load the invoice file, reporting unreadable or invalid data as a bad option."""

    try:
        return InMemoryInvoiceRepository.from_json(path)
    except (OSError, ValueError) as exc:
        # ValueError covers both JSON decoding and pydantic validation errors.
        raise typer.BadParameter(f"cannot load invoices from {path}: {exc}", param_hint="--invoices") from exc


@app.command()
def pay(
    reference: str = typer.Argument(...),
    amount: str = typer.Argument(...),
    invoices: Optional[Path] = typer.Option(None, "--invoices"),
) -> None:
    """Apply a payment of AMOUNT to the invoice REFERENCE."""

    load_dotenv()
    try:
        settings = Settings()
    except ValidationError as exc:
        typer.echo(f"invalid settings: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    configure_logging(settings.log_level)

    payment = Payment(reference=reference, amount=_parse_amount(amount))
    repository = _load_invoices(invoices or Path(settings.invoices_path))
    service = InvoiceService(repository)

    try:
        result = service.process_payment(payment)
    except InvoicingError as exc:
        logger.error("Payment for {} failed: {}", reference, exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    invoice = repository.get_invoice(reference)
    typer.echo(result.message)
    typer.echo(f"[{result.status.value}] paid={invoice.amount_paid} tax={invoice.tax_amount}")


if __name__ == "__main__":
    app()
