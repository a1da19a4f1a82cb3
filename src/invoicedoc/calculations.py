"""Invoice totals engine.

The functions in this module are pure: they never validate, log or raise on
their own. Unusual input (negative rates, ``NaN``) flows arithmetically into
the result and is left to the renderer and callers to judge.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .models import DiscountType, LineItem
from .utils import ZERO

_HUNDRED = Decimal("100")
_NAN = Decimal("NaN")


@dataclass(frozen=True)
class CalculationResult:
    """Derived financial summary of an invoice."""

    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total: Decimal

    @property
    def after_discount(self) -> Decimal:
        return self.subtotal - self.discount_amount


def calculate_line_total(quantity: Decimal, rate: Decimal) -> Decimal:
    """Return the extended amount of a single line."""

    return quantity * rate


def calculate_invoice_total(
    items: Iterable[LineItem],
    discount_type: DiscountType | str | None = None,
    discount_value: Decimal | None = None,
    tax_rate_percent: Decimal | None = None,
) -> CalculationResult:
    """Compute subtotal, discount, tax and total for ``items``.

    Parameters
    ----------
    items:
        Line items of the invoice. Their order does not affect the result.
    discount_type:
        ``None`` or a :class:`DiscountType` (the string codes ``"percent"``
        and ``"fixed"`` are accepted as well).
    discount_value:
        Only used when ``discount_type`` is set and the value is non-zero. A
        zero value therefore behaves exactly like "no discount".
    tax_rate_percent:
        Percentage applied to the amount left after the discount.

    Returns
    -------
    CalculationResult
        A new immutable result for every call.
    """

    subtotal = sum(
        (calculate_line_total(item.quantity, item.rate) for item in items), ZERO
    )

    discount_amount = ZERO
    if discount_type and discount_value:
        kind = DiscountType(discount_type)
        if kind is DiscountType.PERCENT:
            discount_amount = subtotal * (discount_value / _HUNDRED)
        elif kind is DiscountType.FIXED:
            if discount_value.is_nan() or subtotal.is_nan():
                discount_amount = _NAN
            else:
                # A fixed discount never pushes the invoice below zero.
                discount_amount = min(discount_value, subtotal)

    after_discount = subtotal - discount_amount
    tax_amount = after_discount * (tax_rate_percent / _HUNDRED) if tax_rate_percent else ZERO
    total = after_discount + tax_amount

    return CalculationResult(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        total=total,
    )


__all__ = ["CalculationResult", "calculate_line_total", "calculate_invoice_total"]
