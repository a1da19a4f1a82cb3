"""Aggregate invoice totals per currency and export them to Excel."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook

from .calculations import CalculationResult, calculate_invoice_total
from .config import RenderSettings
from .errors import InvalidInvoiceData
from .models import InvoiceDocumentInput
from .utils import ZERO

LOGGER = logging.getLogger(__name__)

REPORT_FILENAME = "invoice-totals.xlsx"


@dataclass
class CurrencyTotal:
    """Running totals for every invoice issued in one currency."""

    currency: str
    invoices: int = 0
    subtotal: Decimal = field(default_factory=lambda: ZERO)
    discount: Decimal = field(default_factory=lambda: ZERO)
    tax: Decimal = field(default_factory=lambda: ZERO)
    total: Decimal = field(default_factory=lambda: ZERO)

    def add(self, result: CalculationResult) -> None:
        self.invoices += 1
        self.subtotal += result.subtotal
        self.discount += result.discount_amount
        self.tax += result.tax_amount
        self.total += result.total


@dataclass(frozen=True)
class InvoiceRow:
    number: str
    issued_date: str
    client: str
    currency: str
    status: str
    result: CalculationResult


@dataclass
class ReportData:
    totals: list[CurrencyTotal]
    rows: list[InvoiceRow]


def calculate_for(document: InvoiceDocumentInput) -> CalculationResult:
    """Run the totals engine with the invoice's own discount and tax settings."""

    invoice = document.invoice
    if invoice is None:
        raise InvalidInvoiceData("Invoice data is required", field="invoice")
    return calculate_invoice_total(
        document.items,
        invoice.discount_type,
        invoice.discount_value,
        document.tax.rate_percent if document.tax is not None else None,
    )


def document_currency(document: InvoiceDocumentInput, settings: RenderSettings) -> str:
    invoice_currency = document.invoice.currency_code if document.invoice else None
    return (document.currency or invoice_currency or settings.default_currency).upper()


def aggregate_invoices(
    documents: Iterable[InvoiceDocumentInput], settings: RenderSettings | None = None
) -> ReportData:
    """Compute each invoice total and group the totals by currency.

    Currencies are ordered by total amount, largest first, so the first entry
    is the headline figure. Ties are ordered by currency code.
    """

    settings = settings or RenderSettings()
    by_currency: dict[str, CurrencyTotal] = {}
    rows: list[InvoiceRow] = []

    for document in documents:
        result = calculate_for(document)
        currency = document_currency(document, settings)
        by_currency.setdefault(currency, CurrencyTotal(currency)).add(result)

        invoice = document.invoice
        rows.append(
            InvoiceRow(
                number=str(invoice.number if invoice.number is not None else ""),
                issued_date=invoice.issued_date.isoformat(),
                client=document.client.name if document.client else "",
                currency=currency,
                status=invoice.status.value,
                result=result,
            )
        )

    totals = sorted(by_currency.values(), key=_sort_key)
    LOGGER.info("Aggregated %d invoice(s) across %d currencies", len(rows), len(totals))
    return ReportData(totals=totals, rows=rows)


def _sort_key(entry: CurrencyTotal) -> tuple[bool, Decimal, str]:
    # NaN totals cannot be ordered; they go last.
    if entry.total.is_nan():
        return (True, ZERO, entry.currency)
    return (False, -entry.total, entry.currency)


def summarize_by_currency(
    documents: Iterable[InvoiceDocumentInput], settings: RenderSettings | None = None
) -> list[CurrencyTotal]:
    return aggregate_invoices(documents, settings).totals


def default_report_destination(source: Path) -> Path:
    """Return the default report path, next to ``source``."""

    return source.resolve().parent / REPORT_FILENAME


def write_excel_report(data: ReportData, destination: Path) -> Path:
    """Write the ``Totals`` and ``Invoices`` sheets to ``destination``."""

    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    totals_ws = workbook.active
    totals_ws.title = "Totals"
    totals_ws.append(["Currency", "Invoices", "Subtotal", "Discount", "Tax", "Total"])
    for entry in data.totals:
        totals_ws.append(
            [entry.currency, entry.invoices, entry.subtotal, entry.discount, entry.tax, entry.total]
        )

    invoices_ws = workbook.create_sheet(title="Invoices")
    invoices_ws.append(
        ["Number", "Issued", "Client", "Currency", "Status", "Subtotal", "Discount", "Tax", "Total"]
    )
    for row in data.rows:
        invoices_ws.append(
            [
                row.number,
                row.issued_date,
                row.client,
                row.currency,
                row.status,
                row.result.subtotal,
                row.result.discount_amount,
                row.result.tax_amount,
                row.result.total,
            ]
        )

    workbook.save(destination)
    LOGGER.info("Totals report written to %s", destination)
    return destination


__all__ = [
    "REPORT_FILENAME",
    "CurrencyTotal",
    "InvoiceRow",
    "ReportData",
    "calculate_for",
    "aggregate_invoices",
    "summarize_by_currency",
    "default_report_destination",
    "write_excel_report",
]
