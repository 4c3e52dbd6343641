"""Shared helpers for reading uploaded CSV and Excel files into rows."""
from __future__ import annotations

import csv
import hashlib
import io
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from routemanager.core.errors import ParseFailure
from routemanager.core.normalize import to_text

logger = logging.getLogger(__name__)

CSV_SUFFIXES = {".csv"}
EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
LEGACY_EXCEL_SUFFIXES = {".xls"}

# Either a path on disk or an in-memory upload given as (filename, content).
TableSource = Union[Path, str, Tuple[str, bytes]]


def upload_fingerprint(name: str, content: bytes) -> Tuple[str, str]:
    """Identify an upload by name and content so corrected re-uploads are not skipped."""

    return name, hashlib.sha256(content).hexdigest()


def _source_name_and_bytes(source: TableSource) -> Tuple[str, bytes]:
    if isinstance(source, tuple):
        name, content = source
        return name, content
    path = Path(source)
    return path.name, path.read_bytes()


def _build_rows(header: Sequence[Any], body: Iterable[Sequence[Any]]) -> List[Dict[str, str]]:
    """Pair header cells with row cells, defaulting missing cells to ``""``."""

    columns = [to_text(cell).strip() for cell in header]
    rows: List[Dict[str, str]] = []
    for raw in body:
        cells = [to_text(cell) for cell in raw]
        if not any(cell.strip() for cell in cells):
            continue
        row = {}
        for position, column in enumerate(columns):
            if not column:
                continue
            row[column] = cells[position] if position < len(cells) else ""
        rows.append(row)
    return rows


def _split_header(values: Sequence[Sequence[Any]]) -> Tuple[List[str], List[Dict[str, str]]]:
    if not values:
        return [], []
    header = [to_text(cell).strip() for cell in values[0]]
    return [column for column in header if column], _build_rows(header, values[1:])


def _read_csv(content: bytes) -> Tuple[List[str], List[Dict[str, str]]]:
    text = content.decode("utf-8-sig")
    reader = csv.reader(io.StringIO(text, newline=""))
    return _split_header(list(reader))


def _read_excel(content: bytes) -> Tuple[List[str], List[Dict[str, str]]]:
    from openpyxl import load_workbook

    workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        values = list(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()
    return _split_header(values)


def _read_legacy_excel(content: bytes) -> Tuple[List[str], List[Dict[str, str]]]:
    import xlrd

    book = xlrd.open_workbook(file_contents=content, on_demand=True)
    try:
        sheet = book.sheet_by_index(0)
        values = [sheet.row_values(index) for index in range(sheet.nrows)]
    finally:
        book.release_resources()
    return _split_header(values)


def read_table(source: TableSource) -> Tuple[List[str], List[Dict[str, str]]]:
    """Return the header and the data rows of the first sheet of a file.

    Raises ``ParseFailure`` for unsupported extensions and for any file that
    cannot be decoded.
    """

    try:
        name, content = _source_name_and_bytes(source)
    except OSError as exc:
        logger.error("Could not open %s: %s", source, exc)
        raise ParseFailure(f"Could not open {source}") from exc

    suffix = Path(name).suffix.lower()
    try:
        if suffix in CSV_SUFFIXES:
            return _read_csv(content)
        if suffix in EXCEL_SUFFIXES:
            return _read_excel(content)
        if suffix in LEGACY_EXCEL_SUFFIXES:
            return _read_legacy_excel(content)
    except Exception as exc:
        logger.exception("Failed to parse %s", name)
        raise ParseFailure(f"Error parsing {name}. Please check format.") from exc

    logger.error("Unsupported file type for %s", name)
    raise ParseFailure(f"Unsupported file type '{suffix or name}'; upload a CSV, XLSX or XLS file.")


def read_rows(source: TableSource) -> List[Dict[str, str]]:
    """Parse a CSV or XLSX file into row dictionaries keyed by header."""

    _, rows = read_table(source)
    return rows
