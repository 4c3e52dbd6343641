"""Batch orchestration for running a reconciliation without the dashboard."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from routemanager.core.errors import IncompleteData
from routemanager.core.models import MissingParty, TemplateColumnSet
from routemanager.core.normalize import normalize_name
from routemanager.ingestion.common import TableSource, read_rows
from routemanager.ingestion.loader import (
    ADDRESS,
    PARTY_NAME,
    SALES_PHONE,
    load_master,
    load_sales,
    load_template,
)
from routemanager.processing import session as workflow
from routemanager.reporting.sinks import write_csv, write_excel
from routemanager.reporting.templates import REPORT_HEADERS, report_rows_to_dicts
from routemanager.review.workflow import GapFillSession

logger = logging.getLogger(__name__)


def load_fills(source: TableSource) -> Dict[str, Dict[str, str]]:
    """Read operator-supplied phone/address values keyed by normalized name.

    Later rows for the same party overwrite earlier ones.
    """

    fills: Dict[str, Dict[str, str]] = {}
    for row in read_rows(source):
        key = normalize_name(row.get(PARTY_NAME))
        if not key:
            continue
        fills[key] = {"phone": row.get(SALES_PHONE, ""), "address": row.get(ADDRESS, "")}
    logger.info("Loaded %d gap-fill rows", len(fills))
    return fills


def apply_fills(gap_fill: GapFillSession, fills: Dict[str, Dict[str, str]]) -> int:
    """Copy matching fill values into the gap-fill entries; return how many matched."""

    matched = 0
    entries: List[MissingParty] = gap_fill.entries
    for index, entry in enumerate(entries):
        values = fills.get(normalize_name(entry.name))
        if not values:
            continue
        matched += 1
        if values["address"]:
            gap_fill.update_field(index, "address", values["address"])
        if values["phone"]:
            gap_fill.update_field(index, "phone", values["phone"])
    return matched


def run_pipeline(
    master_path: Path,
    sales_path: Path,
    output_path: Path,
    template_path: Path | None = None,
    fills_path: Path | None = None,
    sink: str = "excel",
    allow_incomplete: bool = True,
) -> Path:
    """Load both lists, fill gaps, and write the route report."""

    logger.info("Pipeline starting for master %s and sales %s", master_path, sales_path)
    state = workflow.restart()
    state = workflow.with_master(state, load_master(master_path))
    state = workflow.with_sales(state, load_sales(sales_path))
    state = workflow.reconcile(state)

    if state.step is workflow.Step.FIX_MISSING:
        if fills_path:
            matched = apply_fills(state.gap_fill, load_fills(fills_path))
            logger.info("Applied gap-fill values to %d of %d missing parties", matched, len(state.gap_fill))
        try:
            state = workflow.finalize_missing(state, confirm_incomplete=allow_incomplete)
        except IncompleteData as exc:
            names = [state.gap_fill.entries[index].name for index in exc.indexes]
            logger.error("Missing addresses for: %s", ", ".join(names))
            raise

    template = load_template(template_path) if template_path else TemplateColumnSet(tuple(REPORT_HEADERS))
    state = workflow.with_template(state, template)
    state = workflow.generate_report(state)

    rows = report_rows_to_dicts(state.report)
    if sink == "csv":
        write_csv(rows, output_path)
    else:
        write_excel(rows, output_path)
    logger.info("Wrote report with %d rows to %s", len(rows), output_path)
    return output_path
