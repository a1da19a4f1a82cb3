"""Utility helpers shared across invoicedoc modules."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def parse_decimal(
    value: str | int | float | Decimal | None, *, default: Decimal = ZERO
) -> Decimal:
    """Convert the provided value to :class:`~decimal.Decimal`.

    Empty strings and invalid values return the supplied ``default``. Floats
    go through :func:`str` so ``0.1`` becomes ``Decimal("0.1")``.
    """

    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return default

    text = str(value).strip()
    if not text:
        return default

    try:
        return Decimal(text)
    except (InvalidOperation, ValueError):
        return default


def parse_optional_decimal(value: str | int | float | Decimal | None) -> Decimal | None:
    """Like :func:`parse_decimal` but keep ``None`` for missing values."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_decimal(value, default=Decimal("NaN"))
    if parsed.is_nan():
        return None
    return parsed


def parse_date(value: str | date | datetime | None) -> date | None:
    """Return a :class:`~datetime.date` for ``value``.

    Accepts ``date`` instances, ``datetime`` instances (the date part is kept)
    and ISO 8601 strings such as ``2024-01-31`` or ``2024-01-31T10:00:00Z``.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    return date.fromisoformat(text[:10])


def clean_text(value: object) -> str | None:
    """Return ``value`` as text, mapping blank values to ``None``."""

    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


__all__ = ["ZERO", "parse_decimal", "parse_optional_decimal", "parse_date", "clean_text"]
