from __future__ import annotations

import json
from dataclasses import replace
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable

import pytest

from invoicedoc.models import (
    Client,
    DiscountType,
    DueOption,
    Invoice,
    InvoiceDocumentInput,
    Issuer,
    LineItem,
    Tax,
)


def _items() -> tuple[LineItem, ...]:
    return (
        LineItem("Design work", Decimal("2"), Decimal("150")),
        LineItem("Hosting", Decimal("1"), Decimal("20")),
    )


@pytest.fixture
def make_document() -> Callable[..., InvoiceDocumentInput]:
    """Factory for a complete renderer input; keyword overrides replace fields.

    ``invoice_fields`` is applied to the nested :class:`Invoice`.
    """

    def _make(invoice_fields: dict[str, Any] | None = None, **overrides: Any) -> InvoiceDocumentInput:
        invoice = Invoice(
            number=42,
            issued_date=date(2024, 3, 1),
            due_option=DueOption.NET_14,
            currency_code="USD",
            discount_type=DiscountType.PERCENT,
            discount_value=Decimal("10"),
        )
        if invoice_fields:
            invoice = replace(invoice, **invoice_fields)
        document = InvoiceDocumentInput(
            invoice=invoice,
            client=Client(name="Globex Corporation", contact_name="Hank Scorpio"),
            issuer=Issuer(company_name="Acme Studio", email="billing@acme.test"),
            items=_items(),
            tax=Tax(name="VAT", rate_percent=Decimal("10")),
            currency="USD",
        )
        return replace(document, **overrides)

    return _make


SAMPLE_RECORD: dict[str, Any] = {
    "invoice": {
        "number": 7,
        "issued_date": "2023-01-31",
        "due_option": "net_30",
        "currency_code": "USD",
        "status": "unpaid",
        "discount_type": "fixed",
        "discount_value": 20,
        "public_notes": "Thanks for your business!\nPay by bank transfer.",
        "terms": "Net 30",
    },
    "client": {
        "name": "Initech",
        "company_name": "Initech LLC",
        "billing_address": "4120 Freidrich Ln\nAustin, TX",
        "email": "ap@initech.test",
    },
    "issuer": {
        "company_name": "Acme Studio",
        "contact_name": "Wile E.",
        "address": "1 Canyon Rd",
    },
    "items": [
        {"name": "Consulting", "qty": 1, "rate": 100},
    ],
    "tax": {"name": "Sales tax", "rate_percent": 10},
    "currency": "USD",
}


@pytest.fixture
def invoice_json(tmp_path: Path) -> Callable[..., Path]:
    """Write an invoice JSON file (``SAMPLE_RECORD`` merged with overrides)."""

    def _write(name: str = "invoice.json", **sections: Any) -> Path:
        record = {**SAMPLE_RECORD, **sections}
        path = tmp_path / name
        path.write_text(json.dumps(record), encoding="utf-8")
        return path

    return _write
