"""Invoice document renderer.

Turns an :class:`~invoicedoc.models.InvoiceDocumentInput` into a complete,
self-contained HTML document laid out for A4 printing. Rendering is a plain
function: nothing is cached between calls and the same input always yields
the same markup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..calculations import CalculationResult, calculate_invoice_total
from ..config import RenderSettings
from ..errors import InvalidInvoiceData, InvoiceDocumentError, TemplateGenerationFailed
from ..formatters import format_currency, format_date, format_number, resolve_due_date
from ..markup import Document, Element, StyleSheet, el, multiline_text
from ..models import Client, Invoice, InvoiceDocumentInput, Issuer, LineItem, Tax
from .styles import INVOICE_CSS

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Context:
    """Validated input plus the values derived from it."""

    invoice: Invoice
    client: Client
    issuer: Issuer
    items: tuple[LineItem, ...]
    tax: Tax | None
    currency: str
    calculation: CalculationResult
    issued_date: str
    due_date: str
    company_name: str

    def money(self, amount) -> str:
        return format_currency(amount, self.currency)


def render_invoice_document(
    document: InvoiceDocumentInput, settings: RenderSettings | None = None
) -> str:
    """Return the HTML markup for ``document``.

    Raises
    ------
    InvalidInvoiceData
        When the invoice, client, issuer, items or invoice number are missing.
        Raised before any layout work starts.
    TemplateGenerationFailed
        When anything else goes wrong while assembling the document. The
        original exception is chained and available as ``cause``.
    """

    settings = settings or RenderSettings()
    validate_document_input(document)
    LOGGER.debug(
        "Rendering invoice %s with %d item(s)",
        document.invoice.number,  # type: ignore[union-attr]
        len(document.items),
    )

    try:
        context = _derive_context(document, settings)
        markup = _build_document(context).render()
    except InvoiceDocumentError:
        raise
    except Exception as exc:
        LOGGER.exception("Template generation failed")
        raise TemplateGenerationFailed(
            f"Template generation failed: {exc}", cause=exc
        ) from exc

    LOGGER.debug("Rendered invoice %s (%d characters)", context.invoice.number, len(markup))
    return markup


def validate_document_input(document: InvoiceDocumentInput) -> None:
    """Fail fast with :class:`InvalidInvoiceData` on incomplete input."""

    checks = (
        (document.invoice is not None, "invoice", "Invoice data is required"),
        (document.client is not None, "client", "Client data is required"),
        (document.issuer is not None, "issuer", "Issuer data is required"),
        (bool(document.items), "items", "At least one line item is required"),
        (
            document.invoice is not None and _has_number(document.invoice),
            "number",
            "Invoice number is required",
        ),
    )
    for ok, field, message in checks:
        if not ok:
            LOGGER.warning("Invalid invoice data: %s", message)
            raise InvalidInvoiceData(message, field=field)


def _has_number(invoice: Invoice) -> bool:
    return invoice.number is not None and str(invoice.number).strip() != ""


def _derive_context(document: InvoiceDocumentInput, settings: RenderSettings) -> _Context:
    invoice = document.invoice
    tax = document.tax
    items = tuple(document.items)

    calculation = calculate_invoice_total(
        items,
        invoice.discount_type,
        invoice.discount_value,
        tax.rate_percent if tax is not None else None,
    )

    if invoice.due_date is not None:
        due_date = format_date(invoice.due_date)
    else:
        resolved = resolve_due_date(invoice.due_option, invoice.issued_date)
        due_date = format_date(resolved) if resolved else settings.fallback_due_label

    return _Context(
        invoice=invoice,
        client=document.client,
        issuer=document.issuer,
        items=items,
        tax=tax,
        currency=document.currency or invoice.currency_code or settings.default_currency,
        calculation=calculation,
        issued_date=format_date(invoice.issued_date),
        due_date=due_date,
        company_name=document.issuer.company_name or settings.default_company_name,
    )


def _build_document(ctx: _Context) -> Document:
    head = el(
        "head",
        el("meta", charset="utf-8"),
        el("meta", name="viewport", content="width=device-width, initial-scale=1.0"),
        el("title", f"Invoice #{ctx.invoice.number}"),
        el("style").append(StyleSheet(INVOICE_CSS)),
    )
    body = el(
        "body",
        el(
            "div",
            _header(ctx),
            _parties(ctx),
            _items_table(ctx),
            _summary(ctx),
            _notes(ctx),
            cls="invoice",
        ),
    )
    return Document(head=head, body=body)


def _header(ctx: _Context) -> Element:
    po_number = ctx.invoice.po_number
    return el(
        "div",
        el(
            "div",
            el("h1", ctx.company_name),
            el("div", f"Invoice #{ctx.invoice.number}", cls="invoice-number"),
            el("div", f"PO {po_number}", cls="po-number") if po_number else None,
            cls="company-title",
        ),
        el(
            "div",
            _date_block("invoice-date", "Date Issued", ctx.issued_date),
            _date_block("due-date", "Due Date", ctx.due_date),
            cls="invoice-dates",
        ),
        cls="top-header",
    )


def _date_block(cls: str, label: str, value: str) -> Element:
    return el(
        "div",
        el("div", label, cls="date-label"),
        el("div", value, cls="date-value"),
        cls=cls,
    )


def _optional_line(value: str | None, cls: str) -> Element | None:
    return el("div", value, cls=cls) if value else None


def _address(value: str | None) -> Element | None:
    if not value:
        return None
    return el("div", cls="address").extend(multiline_text(value))


def _parties(ctx: _Context) -> Element:
    client, issuer = ctx.client, ctx.issuer
    bill_to = el(
        "div",
        el("h3", "Bill To", cls="section-title"),
        el(
            "div",
            el("div", client.name or "", cls="contact-name"),
            _optional_line(client.company_name, "company-name"),
            _optional_line(client.contact_name, "person-name"),
            _address(client.billing_address),
            _optional_line(client.email, "email"),
            _optional_line(client.phone, "phone"),
            cls="contact-details",
        ),
        cls="bill-to-column",
    )
    sender = el(
        "div",
        el("h3", "From", cls="section-title"),
        el(
            "div",
            el("div", ctx.company_name, cls="company-name"),
            _optional_line(issuer.contact_name, "person-name"),
            _address(issuer.address),
            _optional_line(issuer.email, "email"),
            _optional_line(issuer.phone, "phone"),
            cls="contact-details",
        ),
        cls="from-column",
    )
    return el("div", bill_to, sender, cls="from-to-section avoid-break")


def _items_table(ctx: _Context) -> Element:
    header = el(
        "thead",
        el(
            "tr",
            el("th", "Description", cls="desc"),
            el("th", "Qty", cls="qty"),
            el("th", "Rate", cls="rate"),
            el("th", "Amount", cls="amount"),
        ),
    )
    body = el("tbody")
    for index, item in enumerate(ctx.items):
        body.append(
            el(
                "tr",
                el("td", item.name or "", cls="desc"),
                el("td", format_number(item.quantity), cls="qty"),
                el("td", ctx.money(item.rate), cls="rate"),
                el("td", ctx.money(item.amount), cls="amount"),
                cls="even" if index % 2 == 0 else "odd",
            )
        )
    return el("div", el("table", header, body, cls="items-table"), cls="items-section")


def _summary_row(label: str, value: str, *, row_cls: str = "summary-row", value_cls: str = "value") -> Element:
    return el(
        "div",
        el("span", label, cls="label"),
        el("span", value, cls=value_cls),
        cls=row_cls,
    )


def _is_positive(amount) -> bool:
    return not amount.is_nan() and amount > 0


def _summary(ctx: _Context) -> Element:
    calc = ctx.calculation
    table = el("div", _summary_row("Subtotal:", ctx.money(calc.subtotal)), cls="summary-table")

    if _is_positive(calc.discount_amount):
        table.append(
            _summary_row(
                "Discount:",
                "-" + ctx.money(calc.discount_amount),
                value_cls="value discount",
            )
        )
    if _is_positive(calc.tax_amount) and ctx.tax is not None:
        label = f"{ctx.tax.name} ({format_number(ctx.tax.rate_percent)}%):"
        table.append(_summary_row(label, ctx.money(calc.tax_amount)))

    table.append(
        _summary_row(
            "Total:",
            ctx.money(calc.total),
            row_cls="summary-row total-row",
            value_cls="value total",
        )
    )
    return el("div", table, cls="summary-section avoid-break")


def _notes(ctx: _Context) -> Element | None:
    notes, terms = ctx.invoice.public_notes, ctx.invoice.terms
    if not notes and not terms:
        return None

    section = el("div", cls="notes-section avoid-break")
    if notes:
        section.append(
            el("div", el("h4", "Notes:"), el("p").extend(multiline_text(notes)), cls="notes")
        )
    if terms:
        section.append(
            el(
                "div",
                el("h4", "Terms & Conditions:"),
                el("p").extend(multiline_text(terms)),
                cls="terms",
            )
        )
    return section


__all__ = ["render_invoice_document", "validate_document_input"]
