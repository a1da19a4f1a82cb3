"""Generate an Excel report with invoice totals grouped by currency."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ..config import load_settings
from ..errors import InvoiceDocumentError
from ..loaders import load_document_input
from ..reporting import aggregate_invoices, default_report_destination, write_excel_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicedoc report",
        description=(
            "Write an Excel workbook with the total of every invoice and the "
            "totals per currency."
        ),
    )
    parser.add_argument("inputs", type=Path, nargs="+", help="Invoice JSON files")
    parser.add_argument("-o", "--output", type=Path, help="Destination .xlsx file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()

    try:
        documents = [load_document_input(path) for path in args.inputs]
        data = aggregate_invoices(documents, settings)
    except InvoiceDocumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    destination = args.output or default_report_destination(args.inputs[0])
    write_excel_report(data, destination)
    print(f"Totals report written to: {destination}")
    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
