"""Document rendering for invoices."""

from __future__ import annotations

from .invoice import render_invoice_document, validate_document_input
from .styles import INVOICE_CSS

__all__ = ["INVOICE_CSS", "render_invoice_document", "validate_document_input"]
