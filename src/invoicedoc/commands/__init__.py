"""Command implementations exposed through :mod:`invoicedoc.cli`."""

__all__ = ["render", "report", "totals"]
