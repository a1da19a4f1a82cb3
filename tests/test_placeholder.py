"""Placeholder tests ensuring the package can be imported."""

from __future__ import annotations

import importlib


def test_import_package() -> None:
    module = importlib.import_module("invoicedoc")
    assert hasattr(module, "__all__")
    for name in module.__all__:
        importlib.import_module(f"invoicedoc.{name}")
