"""Build renderer input from plain JSON-like records.

The records use the field names of the application's database rows
(``qty``, ``rate_percent``, ``issued_date``, ``billing_address`` ...). Missing
top-level sections are kept as ``None`` so the renderer can report them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .errors import InvoiceDataError
from .models import (
    Client,
    DiscountType,
    DueOption,
    Invoice,
    InvoiceDocumentInput,
    InvoiceStatus,
    Issuer,
    LineItem,
    Tax,
)
from .utils import clean_text, parse_date, parse_decimal, parse_optional_decimal


def load_document_input(path: Path) -> InvoiceDocumentInput:
    """Read ``path`` (a JSON document) and return the renderer input."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvoiceDataError(f"{path}: cannot read file ({exc})") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvoiceDataError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, Mapping):
        raise InvoiceDataError(f"{path}: expected a JSON object")
    return document_input_from_mapping(data)


def document_input_from_mapping(data: Mapping[str, Any]) -> InvoiceDocumentInput:
    invoice = _section(data, "invoice")
    client = _section(data, "client")
    issuer = _section(data, "issuer")
    tax = _section(data, "tax")

    items_data = data.get("items") or []
    if not isinstance(items_data, list):
        raise InvoiceDataError("items must be a list")

    return InvoiceDocumentInput(
        invoice=invoice_from_mapping(invoice) if invoice is not None else None,
        client=client_from_mapping(client) if client is not None else None,
        issuer=issuer_from_mapping(issuer) if issuer is not None else None,
        items=tuple(line_item_from_mapping(item) for item in items_data),
        tax=tax_from_mapping(tax) if tax is not None else None,
        currency=clean_text(data.get("currency")),
    )


def invoice_from_mapping(data: Mapping[str, Any]) -> Invoice:
    issued_date = _date(data, "issued_date")
    if issued_date is None:
        raise InvoiceDataError("invoice.issued_date is required")

    return Invoice(
        number=data.get("number"),
        issued_date=issued_date,
        due_option=_enum(DueOption, data.get("due_option"), DueOption.NONE),
        due_date=_date(data, "due_date"),
        currency_code=clean_text(data.get("currency_code")),
        status=_enum(InvoiceStatus, data.get("status"), InvoiceStatus.UNPAID),
        discount_type=_enum(DiscountType, data.get("discount_type"), None),
        discount_value=parse_optional_decimal(data.get("discount_value")),
        public_notes=clean_text(data.get("public_notes")),
        terms=clean_text(data.get("terms")),
        po_number=clean_text(data.get("po_number")),
    )


def client_from_mapping(data: Mapping[str, Any]) -> Client:
    return Client(
        name=str(data.get("name") or ""),
        company_name=clean_text(data.get("company_name")),
        contact_name=clean_text(data.get("contact_name")),
        email=clean_text(data.get("email")),
        phone=clean_text(data.get("phone")),
        billing_address=clean_text(data.get("billing_address")),
    )


def issuer_from_mapping(data: Mapping[str, Any]) -> Issuer:
    return Issuer(
        company_name=clean_text(data.get("company_name")),
        contact_name=clean_text(data.get("contact_name")),
        email=clean_text(data.get("email")),
        phone=clean_text(data.get("phone")),
        address=clean_text(data.get("address")),
    )


def line_item_from_mapping(data: Mapping[str, Any]) -> LineItem:
    if not isinstance(data, Mapping):
        raise InvoiceDataError("each item must be a JSON object")
    quantity = data.get("qty", data.get("quantity"))
    return LineItem(
        name=str(data.get("name") or ""),
        quantity=parse_decimal(quantity),
        rate=parse_decimal(data.get("rate")),
    )


def tax_from_mapping(data: Mapping[str, Any]) -> Tax:
    return Tax(
        name=str(data.get("name") or ""),
        rate_percent=parse_decimal(data.get("rate_percent")),
    )


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise InvoiceDataError(f"{key} must be a JSON object")
    return value


def _date(data: Mapping[str, Any], key: str):
    try:
        return parse_date(data.get(key))
    except ValueError as exc:
        raise InvoiceDataError(f"invalid date for {key}: {data.get(key)!r}") from exc


def _enum(enum_cls, value: Any, default):
    if value is None or value == "":
        return default
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise InvoiceDataError(f"unknown {enum_cls.__name__} code: {value!r}") from exc


__all__ = [
    "load_document_input",
    "document_input_from_mapping",
    "invoice_from_mapping",
    "client_from_mapping",
    "issuer_from_mapping",
    "line_item_from_mapping",
    "tax_from_mapping",
]
