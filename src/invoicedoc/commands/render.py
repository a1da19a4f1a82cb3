"""Render an invoice JSON document to a print-ready HTML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..config import load_settings
from ..errors import InvoiceDocumentError
from ..loaders import load_document_input
from ..render import render_invoice_document

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicedoc render",
        description="Render an invoice (JSON) to a self-contained HTML document.",
    )
    parser.add_argument("input", type=Path, help="Path to the invoice JSON file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Destination .html file (default: invoice_<number>.html next to the input)",
    )
    return parser


def default_output_path(source: Path, number: object) -> Path:
    return source.resolve().parent / f"invoice_{number}.html"


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()

    try:
        document = load_document_input(args.input)
        markup = render_invoice_document(document, settings)
    except InvoiceDocumentError as exc:
        LOGGER.error("Rendering %s failed: %s", args.input, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    destination = args.output or default_output_path(args.input, document.invoice.number)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(markup, encoding="utf-8")
    LOGGER.info("Invoice %s rendered to %s", document.invoice.number, destination)
    print(f"Invoice written to: {destination}")
    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
