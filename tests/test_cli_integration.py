"""Integration-style tests that exercise the CLI entrypoint."""
import csv
import sys
from pathlib import Path

import pytest
from openpyxl import load_workbook

from routemanager.core.errors import IncompleteData


@pytest.fixture(autouse=True)
def _reset_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure sys.argv starts clean for each CLI invocation."""

    monkeypatch.setattr(sys, "argv", ["routemanager.cli"])


def test_cli_writes_excel_output(tmp_path: Path, run_cli, master_csv, sales_csv, template_xlsx, capsys):
    output = tmp_path / "Updated_Route_Report.xlsx"

    run_cli(
        [
            "--master",
            str(master_csv),
            "--sales",
            str(sales_csv),
            "--template",
            str(template_xlsx),
            "--output",
            str(output),
        ]
    )

    sheet = load_workbook(output).active
    assert sheet.title == "Report"
    assert sheet.max_row - 1 == 4
    assert f"Wrote {output}" in capsys.readouterr().out


def test_cli_writes_csv_output(tmp_path: Path, run_cli, master_csv, sales_csv, fills_csv):
    output = tmp_path / "report.csv"

    run_cli(
        [
            "--master",
            str(master_csv),
            "--sales",
            str(sales_csv),
            "--fills",
            str(fills_csv),
            "--output",
            str(output),
            "--sink",
            "csv",
        ]
    )

    with output.open(encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [row["Latitude"] for row in rows] == ["31.65", "-33.86", "", "-33.86"]


def test_cli_strict_flag_propagates_incomplete_data(tmp_path: Path, run_cli, master_csv, sales_csv):
    with pytest.raises(IncompleteData):
        run_cli(
            [
                "--master",
                str(master_csv),
                "--sales",
                str(sales_csv),
                "--output",
                str(tmp_path / "report.xlsx"),
                "--strict",
            ]
        )


def test_cli_requires_master_and_sales(run_cli):
    with pytest.raises(SystemExit):
        run_cli(["--master", "only.csv"])
