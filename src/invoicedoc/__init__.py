"""Top level package for the invoice totals engine and document renderer.

The public entry points are :func:`invoicedoc.calculations.calculate_invoice_total`,
:func:`invoicedoc.formatters.resolve_due_date` and
:func:`invoicedoc.render.render_invoice_document`.
"""

__all__ = [
    "calculations",
    "cli",
    "commands",
    "config",
    "errors",
    "formatters",
    "loaders",
    "logging",
    "markup",
    "models",
    "render",
    "reporting",
    "utils",
]
