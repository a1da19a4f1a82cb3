from __future__ import annotations

from decimal import Decimal

import pytest

from invoicedoc.calculations import calculate_invoice_total, calculate_line_total
from invoicedoc.models import DiscountType, LineItem


def _item(qty: str, rate: str, name: str = "Item") -> LineItem:
    return LineItem(name, Decimal(qty), Decimal(rate))


def test_subtotal_is_sum_of_extended_amounts() -> None:
    items = [_item("2", "150"), _item("3", "0.5"), _item("1", "19.99")]

    result = calculate_invoice_total(items)

    assert result.subtotal == Decimal("321.49")
    assert result.discount_amount == 0
    assert result.tax_amount == 0
    assert result.total == Decimal("321.49")


def test_subtotal_ignores_item_order() -> None:
    items = [_item("2", "150"), _item("3", "0.1"), _item("7", "1.3")]

    forward = calculate_invoice_total(items, DiscountType.PERCENT, Decimal("5"), Decimal("8"))
    backward = calculate_invoice_total(
        list(reversed(items)), DiscountType.PERCENT, Decimal("5"), Decimal("8")
    )

    assert forward == backward


def test_fixed_discount_then_tax_on_discounted_amount() -> None:
    result = calculate_invoice_total(
        [_item("1", "100")], DiscountType.FIXED, Decimal("20"), Decimal("10")
    )

    assert result.discount_amount == Decimal("20")
    assert result.tax_amount == Decimal("8")
    assert result.total == Decimal("88")


def test_percent_discount_with_tax() -> None:
    result = calculate_invoice_total(
        [_item("2", "100")], DiscountType.PERCENT, Decimal("50"), Decimal("20")
    )

    assert result.subtotal == Decimal("200")
    assert result.discount_amount == Decimal("100")
    assert result.tax_amount == Decimal("20")
    assert result.total == Decimal("120")


@pytest.mark.parametrize("value", ["250", "100.01", "1000000"])
def test_fixed_discount_is_capped_at_subtotal(value: str) -> None:
    result = calculate_invoice_total([_item("1", "100")], DiscountType.FIXED, Decimal(value))

    assert result.discount_amount == Decimal("100")
    assert result.total == 0


def test_no_items_gives_all_zero() -> None:
    result = calculate_invoice_total([], DiscountType.PERCENT, Decimal("10"), Decimal("20"))

    assert (result.subtotal, result.discount_amount, result.tax_amount, result.total) == (0, 0, 0, 0)


@pytest.mark.parametrize("discount_type", [DiscountType.FIXED, DiscountType.PERCENT])
def test_zero_discount_value_means_no_discount(discount_type: DiscountType) -> None:
    result = calculate_invoice_total([_item("1", "100")], discount_type, Decimal("0"))

    assert result.discount_amount == 0
    assert result.total == Decimal("100")


def test_discount_value_without_type_is_ignored() -> None:
    result = calculate_invoice_total([_item("1", "100")], None, Decimal("30"))

    assert result.discount_amount == 0


def test_string_discount_codes_are_accepted() -> None:
    result = calculate_invoice_total([_item("1", "80")], "percent", Decimal("25"))

    assert result.discount_amount == Decimal("20")


def test_negative_lines_are_not_rejected() -> None:
    result = calculate_invoice_total([_item("1", "100"), _item("-1", "30")], None, None, Decimal("10"))

    assert result.subtotal == Decimal("70")
    assert result.tax_amount == Decimal("7")
    assert result.total == Decimal("77")


def test_repeated_calls_are_identical() -> None:
    items = [_item("3", "33.33")]

    first = calculate_invoice_total(items, DiscountType.PERCENT, Decimal("12.5"), Decimal("7.25"))
    second = calculate_invoice_total(items, DiscountType.PERCENT, Decimal("12.5"), Decimal("7.25"))

    assert first == second
    assert first is not second
    assert first.after_discount == first.subtotal - first.discount_amount


def test_line_total() -> None:
    assert calculate_line_total(Decimal("2.5"), Decimal("4")) == Decimal("10")
    assert _item("3", "7").amount == Decimal("21")


NAN = Decimal("NaN")


@pytest.mark.parametrize("discount_type", [DiscountType.PERCENT, DiscountType.FIXED])
@pytest.mark.parametrize(
    ("rate", "discount_value", "tax_rate"),
    [
        ("100", NAN, Decimal("10")),
        ("NaN", Decimal("10"), Decimal("10")),
        ("100", Decimal("10"), NAN),
    ],
    ids=["nan-discount", "nan-rate", "nan-tax"],
)
def test_nan_input_propagates_without_raising(discount_type, rate, discount_value, tax_rate) -> None:
    result = calculate_invoice_total([_item("1", rate)], discount_type, discount_value, tax_rate)

    assert result.total.is_nan()


def test_negative_tax_rate_is_applied_as_is() -> None:
    result = calculate_invoice_total([_item("1", "100")], None, None, Decimal("-10"))

    assert result.tax_amount == Decimal("-10")
    assert result.total == Decimal("90")
