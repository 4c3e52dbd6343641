"""Sinks for writing the route report to Excel or CSV."""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from routemanager.reporting.templates import REPORT_HEADERS

REPORT_FILE_NAME = "Updated_Route_Report.xlsx"
REPORT_SHEET = "Report"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def _excel_text(value: Any) -> Any:
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _build_workbook(rows: Iterable[Dict[str, Any]]) -> Workbook:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = REPORT_SHEET
    sheet.append(REPORT_HEADERS)
    for row_index, row in enumerate(rows, start=2):
        for column_index, header in enumerate(REPORT_HEADERS, start=1):
            value = _excel_text(row.get(header, ""))
            cell = sheet.cell(row=row_index, column=column_index, value=value)
            # Values starting with "=" are party text, not formulas.
            if isinstance(value, str):
                cell.data_type = "s"
    return workbook


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write report rows to a single-sheet Excel workbook."""

    ensure_output_dir(output_path)
    _build_workbook(rows).save(output_path)


def excel_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return the report workbook as bytes, ready for a download button."""

    buffer = io.BytesIO()
    _build_workbook(rows).save(buffer)
    return buffer.getvalue()


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write report rows to a CSV file with the report headers."""

    rows: List[Dict[str, Any]] = list(rows)
    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=REPORT_HEADERS)
        writer.writeheader()
        writer.writerows(rows)
