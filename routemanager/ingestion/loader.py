"""Convert imported rows into typed master, sales, and template records.

Column names from the spreadsheets are only referenced here; everything
downstream works with the dataclasses in ``routemanager.core.models``.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Sequence

from routemanager.core.models import PartyRecord, SalesRecord, TemplateColumnSet
from routemanager.core.normalize import to_text
from routemanager.ingestion.common import TableSource, read_table
from routemanager.ingestion.coordinates import extract_coordinates

logger = logging.getLogger(__name__)

PARTY_NAME = "Party Name"
MASTER_PHONE = "Number"
SALES_PHONE = "Phone No."
ADDRESS = "Address"
LATITUDE = "Latitude"
LONGITUDE = "Longitude"


def _field(row: Mapping[str, object], column: str) -> str:
    return to_text(row.get(column))


def row_to_party(row: Mapping[str, object]) -> PartyRecord:
    """Build a master record, filling blank coordinates from the address."""

    address = _field(row, ADDRESS)
    coords = extract_coordinates(address)
    return PartyRecord(
        name=_field(row, PARTY_NAME),
        phone=_field(row, MASTER_PHONE),
        address=address,
        latitude=_field(row, LATITUDE) or coords.lat,
        longitude=_field(row, LONGITUDE) or coords.lng,
    )


def row_to_sale(row: Mapping[str, object]) -> SalesRecord:
    return SalesRecord(name=_field(row, PARTY_NAME), phone=_field(row, SALES_PHONE))


def rows_to_master(rows: Iterable[Mapping[str, object]]) -> List[PartyRecord]:
    return [row_to_party(row) for row in rows]


def rows_to_sales(rows: Iterable[Mapping[str, object]]) -> List[SalesRecord]:
    return [row_to_sale(row) for row in rows]


def rows_to_template(
    rows: Sequence[Dict[str, str]], header: Sequence[str] | None = None
) -> TemplateColumnSet:
    """Return the template's column names.

    The first data row decides the columns; a template with only a header row
    falls back to ``header``.
    """

    if rows:
        return TemplateColumnSet(tuple(rows[0].keys()))
    return TemplateColumnSet(tuple(header or ()))


def load_master(source: TableSource) -> List[PartyRecord]:
    """Read the master party directory from a CSV or XLSX file."""

    _, rows = read_table(source)
    master = rows_to_master(rows)
    with_coords = sum(1 for party in master if party.latitude and party.longitude)
    logger.info("Loaded %d master records (%d with coordinates)", len(master), with_coords)
    return master


def load_sales(source: TableSource) -> List[SalesRecord]:
    """Read the current sales list from a CSV or XLSX file."""

    _, rows = read_table(source)
    sales = rows_to_sales(rows)
    logger.info("Loaded %d sales records", len(sales))
    return sales


def load_template(source: TableSource) -> TemplateColumnSet:
    """Read the report template and return its recognized columns."""

    header, rows = read_table(source)
    template = rows_to_template(rows, header)
    logger.info("Template recognized with %d columns", len(template))
    return template
