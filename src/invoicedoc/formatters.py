"""Formatting helpers and due-date resolution.

Output of these helpers ends up verbatim in rendered documents, so they avoid
anything that depends on the process locale or the current time unless the
caller passes it in explicitly.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from .models import DueOption, InvoiceStatus
from .utils import parse_date, parse_decimal

_CENT = Decimal("0.01")

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# en-US symbols for the currencies the application offers.
CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
    "TWD": "NT$",
}

_NET_DAYS = {
    DueOption.NET_7: 7,
    DueOption.NET_14: 14,
    DueOption.NET_30: 30,
}


def resolve_due_date(option: DueOption | str, issue_date: date) -> date | None:
    """Resolve the symbolic ``option`` into a concrete due date.

    ``NONE`` and ``CUSTOM`` return ``None``: a custom date must come from the
    caller. Net terms are plain calendar-day offsets.
    """

    option = DueOption(option)
    if option is DueOption.NONE or option is DueOption.CUSTOM:
        return None
    if option is DueOption.ON_RECEIPT:
        return issue_date
    return issue_date + timedelta(days=_NET_DAYS[option])


def format_currency(amount: Decimal | int | float, currency_code: str = "USD") -> str:
    """Render ``amount`` the way an en-US currency formatter would.

    Uses zero to two fraction digits (``$100``, ``$99.5``, ``$1,234.57``).
    Codes without a known symbol are printed as a prefix (``CHF 10``).
    """

    code = (currency_code or "USD").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    value = amount if isinstance(amount, Decimal) else parse_decimal(str(amount))

    if value.is_nan():
        return f"{symbol}NaN"
    if value.is_infinite():
        return f"{'-' if value < 0 else ''}{symbol}∞"

    rounded = abs(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.2f}".rstrip("0").rstrip(".")
    sign = "-" if value < 0 and rounded else ""
    return f"{sign}{symbol}{text}"


def format_number(value: Decimal | int | float) -> str:
    """Render quantities and percentages without exponent or trailing zeros."""

    number = value if isinstance(value, Decimal) else parse_decimal(str(value))
    if not number.is_finite():
        return str(number)
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_date(value: date | str) -> str:
    """Return ``Mon D, YYYY`` (for example ``Mar 2, 2023``)."""

    day = parse_date(value)
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_short_date(value: date | str) -> str:
    day = parse_date(value)
    return f"{_MONTHS[day.month - 1]} {day.day}"


def days_until_due(due_date: date | str, today: date | None = None) -> int:
    """Number of calendar days from ``today`` to ``due_date`` (negative if past)."""

    due = parse_date(due_date)
    return (due - (today or date.today())).days


def get_due_text(
    due_date: date | str | None,
    status: InvoiceStatus | str,
    today: date | None = None,
) -> str | None:
    """Short badge text such as ``Due in 3d`` or ``Overdue 2d``.

    Paid invoices and invoices without a due date get no badge.
    """

    if not due_date or InvoiceStatus(status) is InvoiceStatus.PAID:
        return None

    days = days_until_due(due_date, today)
    if days < 0:
        return f"Overdue {abs(days)}d"
    if days == 0:
        return "Due today"
    return f"Due in {days}d"


def format_invoice_number(number: int | str) -> str:
    return "#" + str(number).rjust(4, "0")


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


__all__ = [
    "CURRENCY_SYMBOLS",
    "resolve_due_date",
    "format_currency",
    "format_number",
    "format_date",
    "format_short_date",
    "days_until_due",
    "get_due_text",
    "format_invoice_number",
    "truncate_text",
]
