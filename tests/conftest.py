"""Pytest configuration to make the local package importable without installation."""
import csv
import sys
from pathlib import Path

import pytest
from openpyxl import Workbook

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from routemanager.cli import main as cli_main


def _write_csv_file(path: Path, header: list[str], rows: list[list[str]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(header)
        writer.writerows(rows)
    return path


def _write_xlsx_file(path: Path, header: list[str], rows: list[list[object]]) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(header)
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture
def master_csv(tmp_path: Path) -> Path:
    """Master directory with one GPS address, one street address, and explicit coordinates."""

    return _write_csv_file(
        tmp_path / "master.csv",
        ["Party Name", "Number", "Address", "Latitude", "Longitude"],
        [
            ["Acme Corp", "111", "Shop 4 31.65, 74.89", "", ""],
            ["Gamma Stores", "222", "Main Street", "", ""],
            ["Delta Traders", "333", "Ring Road", "30.1", "71.2"],
        ],
    )


@pytest.fixture
def sales_csv(tmp_path: Path) -> Path:
    return _write_csv_file(
        tmp_path / "sales.csv",
        ["Party Name", "Phone No."],
        [
            ["  ACME   corp ", "999"],
            ["Beta LLC", "555"],
            ["Gamma Stores", ""],
            ["beta llc", ""],
        ],
    )


@pytest.fixture
def template_xlsx(tmp_path: Path) -> Path:
    return _write_xlsx_file(
        tmp_path / "template.xlsx",
        ["Name", "Latitude", "Longitude", "Address", "Phone", "Group", "Notes"],
        [],
    )


@pytest.fixture
def fills_csv(tmp_path: Path) -> Path:
    return _write_csv_file(
        tmp_path / "fills.csv",
        ["Party Name", "Phone No.", "Address"],
        [["BETA LLC", "", "Warehouse 12 -33.86 151.2"]],
    )


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> None:
        monkeypatch.setattr(sys, "argv", ["routemanager.cli", *args])
        cli_main()

    return _run


@pytest.fixture
def make_csv():
    """Return a helper that writes a CSV file from a header and rows."""

    return _write_csv_file


@pytest.fixture
def make_xlsx():
    """Return a helper that writes a single-sheet workbook from a header and rows."""

    return _write_xlsx_file
