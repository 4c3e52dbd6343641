"""Workflow state for one reconciliation run.

A ``RouteSession`` is an immutable snapshot; every action returns a new
session so the dashboard and the batch pipeline share the same transitions:

    UPLOAD -> (FIX_MISSING) -> MAPPING -> DONE
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from routemanager.core.errors import IncompleteData, InvalidTransition, PrerequisiteMissing
from routemanager.core.models import PartyRecord, ReportRow, SalesRecord, TemplateColumnSet
from routemanager.processing.reconcile import find_missing
from routemanager.reporting.templates import project
from routemanager.review.workflow import GapFillSession

logger = logging.getLogger(__name__)


class Step(str, Enum):
    UPLOAD = "UPLOAD"
    FIX_MISSING = "FIX_MISSING"
    MAPPING = "MAPPING"
    DONE = "DONE"


STEP_LABELS = {
    Step.UPLOAD: "Upload Files",
    Step.FIX_MISSING: "Fix Missing Data",
    Step.MAPPING: "Template Mapping",
    Step.DONE: "Generate Report",
}


@dataclass(frozen=True)
class RouteSession:
    step: Step = Step.UPLOAD
    master: Tuple[PartyRecord, ...] = ()
    sales: Tuple[SalesRecord, ...] = ()
    template: TemplateColumnSet = field(default_factory=TemplateColumnSet)
    gap_fill: Optional[GapFillSession] = None
    report: Tuple[ReportRow, ...] = ()


def _require_step(session: RouteSession, *allowed: Step) -> None:
    if session.step not in allowed:
        names = ", ".join(step.value for step in allowed)
        logger.error("Action not allowed in step %s (expected %s)", session.step.value, names)
        raise InvalidTransition(f"Action not allowed in step {session.step.value}; expected {names}")


def restart() -> RouteSession:
    """Start over with a clean session."""

    return RouteSession()


def with_master(session: RouteSession, master: Iterable[PartyRecord]) -> RouteSession:
    """Replace the master list wholesale (a re-upload)."""

    _require_step(session, Step.UPLOAD)
    return replace(session, master=tuple(master))


def with_sales(session: RouteSession, sales: Iterable[SalesRecord]) -> RouteSession:
    _require_step(session, Step.UPLOAD)
    return replace(session, sales=tuple(sales))


def with_template(session: RouteSession, template: TemplateColumnSet) -> RouteSession:
    _require_step(session, Step.MAPPING)
    return replace(session, template=template)


def reconcile(session: RouteSession) -> RouteSession:
    """Compare sales against master and move to the next step.

    Goes to FIX_MISSING when some sales parties are unknown, otherwise
    straight to MAPPING.
    """

    _require_step(session, Step.UPLOAD)
    if not session.master or not session.sales:
        logger.warning("Reconciliation requested before both files were loaded")
        raise PrerequisiteMissing("Please upload both Master and Sales files first.")

    missing = find_missing(session.master, session.sales)
    if missing:
        return replace(session, step=Step.FIX_MISSING, gap_fill=GapFillSession(missing))
    return replace(session, step=Step.MAPPING, gap_fill=None)


def back_to_upload(session: RouteSession) -> RouteSession:
    _require_step(session, Step.FIX_MISSING)
    return replace(session, step=Step.UPLOAD, gap_fill=None)


def finalize_missing(session: RouteSession, confirm_incomplete: bool = False) -> RouteSession:
    """Append the completed parties to the master list and move to MAPPING.

    Raises ``IncompleteData`` when addresses are blank and the operator has
    not confirmed; calling again with ``confirm_incomplete=True`` proceeds.
    """

    _require_step(session, Step.FIX_MISSING)
    gap_fill = session.gap_fill or GapFillSession()
    incomplete = gap_fill.incomplete_entries()
    if incomplete and not confirm_incomplete:
        raise IncompleteData(incomplete)
    if incomplete:
        logger.warning("Proceeding with %d parties without an address", len(incomplete))

    additions = gap_fill.finalize()
    return replace(
        session,
        step=Step.MAPPING,
        master=session.master + tuple(additions),
        gap_fill=None,
    )


def generate_report(session: RouteSession) -> RouteSession:
    """Project the sales list onto the report schema and finish the run."""

    _require_step(session, Step.MAPPING)
    if not session.template.recognized:
        raise PrerequisiteMissing("Upload a report template before generating the report.")

    report = project(session.sales, session.master)
    logger.info("Generated report with %d rows", len(report))
    return replace(session, step=Step.DONE, report=tuple(report))
