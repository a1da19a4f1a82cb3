"""Print the computed totals of an invoice JSON document."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..config import load_settings
from ..errors import InvoiceDocumentError
from ..formatters import format_currency
from ..loaders import load_document_input
from ..reporting import calculate_for, document_currency


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicedoc totals",
        description="Show subtotal, discount, tax and total for an invoice (JSON).",
    )
    parser.add_argument("input", type=Path, help="Path to the invoice JSON file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()

    try:
        document = load_document_input(args.input)
        result = calculate_for(document)
    except InvoiceDocumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    currency = document_currency(document, settings)
    for label, amount in (
        ("Subtotal", result.subtotal),
        ("Discount", result.discount_amount),
        ("Tax", result.tax_amount),
        ("Total", result.total),
    ):
        print(f"{label + ':':<10} {format_currency(amount, currency)}")
    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
