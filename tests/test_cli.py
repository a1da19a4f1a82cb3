from __future__ import annotations

from pathlib import Path

import pytest
from lxml import html
from openpyxl import load_workbook

from invoicedoc import cli
from invoicedoc.commands import render, report, totals


@pytest.fixture(autouse=True)
def _isolated_logs(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("INVOICEDOC_LOG_DIR", str(tmp_path / "logs"))


def test_available_commands() -> None:
    assert [spec.name for spec in cli.available_commands()] == ["render", "totals", "report"]


def test_render_command_writes_html(invoice_json, tmp_path: Path) -> None:
    source = invoice_json()
    output = tmp_path / "out" / "invoice.html"

    assert render.main([str(source), "-o", str(output)]) == 0

    tree = html.document_fromstring(output.read_text(encoding="utf-8"))
    # Issued Jan 31 with net 30 terms.
    assert tree.xpath("string(//div[@class='due-date']/div[@class='date-value'])") == "Mar 2, 2023"
    assert tree.xpath("string(//div[contains(@class, 'total-row')]/span[contains(@class, 'value')])") == "$88"


def test_render_command_default_output(invoice_json) -> None:
    source = invoice_json()

    assert render.main([str(source)]) == 0

    assert (source.parent / "invoice_7.html").exists()


def test_render_command_reports_invalid_data(invoice_json, capsys) -> None:
    source = invoice_json(items=[])

    assert render.main([str(source)]) == 1

    assert "At least one line item is required" in capsys.readouterr().err
    assert not (source.parent / "invoice_7.html").exists()


def test_totals_command(invoice_json, capsys) -> None:
    assert totals.main([str(invoice_json())]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Subtotal:  $100",
        "Discount:  $20",
        "Tax:       $8",
        "Total:     $88",
    ]


def test_report_command(invoice_json, tmp_path: Path) -> None:
    first = invoice_json("a.json")
    second = invoice_json("b.json", currency="EUR")
    destination = tmp_path / "totals.xlsx"

    assert report.main([str(first), str(second), "-o", str(destination)]) == 0

    rows = list(load_workbook(destination)["Totals"].iter_rows(values_only=True))
    assert [row[0] for row in rows[1:]] == ["EUR", "USD"]


def test_cli_dispatches_to_command(invoice_json, capsys) -> None:
    assert cli.main(["totals", str(invoice_json())]) == 0

    assert "Total:     $88" in capsys.readouterr().out


def test_cli_help_for_command(capsys) -> None:
    assert cli.main(["render", "--help"]) == 0

    assert "Render an invoice" in capsys.readouterr().out


def test_cli_usage_error_returns_code() -> None:
    assert cli.main(["render"]) == 2


def test_run_unknown_command() -> None:
    with pytest.raises(ValueError):
        cli.run("publish", [])
