"""Value types exchanged between the data source, the engine and the renderer.

Every object here is transient: callers build them for a single calculation
or render and discard them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Sequence


class DiscountType(str, Enum):
    """How an invoice discount is applied to the subtotal."""

    PERCENT = "percent"
    FIXED = "fixed"


class DueOption(str, Enum):
    """Symbolic payment terms resolved against the issue date."""

    NONE = "none"
    ON_RECEIPT = "on_receipt"
    NET_7 = "net_7"
    NET_14 = "net_14"
    NET_30 = "net_30"
    CUSTOM = "custom"


class InvoiceStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"


@dataclass(frozen=True)
class LineItem:
    """One billable row of an invoice."""

    name: str
    quantity: Decimal
    rate: Decimal

    @property
    def amount(self) -> Decimal:
        """Extended amount (``quantity * rate``) without rounding."""

        return self.quantity * self.rate


@dataclass(frozen=True)
class Tax:
    """Named percentage applied to the post-discount amount."""

    name: str
    rate_percent: Decimal


@dataclass(frozen=True)
class Client:
    name: str
    company_name: str | None = None
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None
    billing_address: str | None = None


@dataclass(frozen=True)
class Issuer:
    company_name: str | None = None
    contact_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class Invoice:
    """Invoice metadata as supplied by the data source."""

    number: str | int | None
    issued_date: date
    due_option: DueOption = DueOption.NONE
    due_date: date | None = None
    currency_code: str | None = None
    status: InvoiceStatus = InvoiceStatus.UNPAID
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None
    public_notes: str | None = None
    terms: str | None = None
    po_number: str | None = None


@dataclass(frozen=True)
class InvoiceDocumentInput:
    """Aggregate handed to :func:`invoicedoc.render.render_invoice_document`.

    ``invoice``, ``client`` and ``issuer`` are optional so that incomplete
    records coming from the data source are rejected by the renderer with a
    meaningful error instead of failing at construction time.
    """

    invoice: Invoice | None
    client: Client | None
    issuer: Issuer | None
    items: Sequence[LineItem] = field(default_factory=tuple)
    tax: Tax | None = None
    currency: str | None = None


__all__ = [
    "DiscountType",
    "DueOption",
    "InvoiceStatus",
    "LineItem",
    "Tax",
    "Client",
    "Issuer",
    "Invoice",
    "InvoiceDocumentInput",
]
