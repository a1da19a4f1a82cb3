"""Exceptions raised while preparing or rendering invoice documents."""

from __future__ import annotations


class InvoiceDocumentError(RuntimeError):
    """Base class for every error surfaced by :mod:`invoicedoc`."""


class InvalidInvoiceData(InvoiceDocumentError):
    """Raised when the renderer input is missing required data.

    The check happens before any layout work, so no partial document is ever
    produced. ``field`` names the offending part of the input.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TemplateGenerationFailed(InvoiceDocumentError):
    """Raised when assembling the document fails unexpectedly."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvoiceDataError(InvoiceDocumentError):
    """Raised when an invoice JSON document cannot be loaded."""


__all__ = [
    "InvoiceDocumentError",
    "InvalidInvoiceData",
    "TemplateGenerationFailed",
    "InvoiceDataError",
]
