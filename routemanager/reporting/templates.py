"""Project sales lines and master data into the route report schema."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Sequence

from routemanager.core.models import PartyRecord, ReportRow, SalesRecord
from routemanager.core.normalize import normalize_name
from routemanager.processing.reconcile import master_lookup

logger = logging.getLogger(__name__)

REPORT_HEADERS = [
    "Name",
    "Latitude",
    "Longitude",
    "Address",
    "Phone",
    "Group",
    "Notes",
]


def project(sales: Sequence[SalesRecord], master: Iterable[PartyRecord]) -> List[ReportRow]:
    """Emit one report row per sales record, in sales order.

    Location data comes from the matching master record (last one wins for
    duplicate names). The sales phone takes precedence over the master number.
    """

    lookup = master_lookup(master)
    rows: List[ReportRow] = []
    unmatched = 0
    for sale in sales:
        party = lookup.get(normalize_name(sale.name))
        if party is None:
            unmatched += 1
        rows.append(
            ReportRow(
                name=sale.name,
                latitude=party.latitude if party else "",
                longitude=party.longitude if party else "",
                address=party.address if party else "",
                phone=sale.phone or (party.phone if party else "") or "",
            )
        )
    if unmatched:
        logger.warning("%d sales records have no master match", unmatched)
    return rows


def report_row_to_template_row(row: ReportRow) -> Dict[str, Any]:
    """Convert a ReportRow into the spreadsheet template dictionary."""

    return {
        "Name": row.name,
        "Latitude": row.latitude,
        "Longitude": row.longitude,
        "Address": row.address,
        "Phone": row.phone,
        "Group": row.group,
        "Notes": row.notes,
    }


def report_rows_to_dicts(rows: Iterable[ReportRow]) -> List[Dict[str, Any]]:
    """Convert report rows into header-keyed dictionaries."""

    return [report_row_to_template_row(row) for row in rows]
