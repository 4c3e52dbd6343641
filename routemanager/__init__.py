"""Reconcile sales parties against a master directory and build route reports."""
from routemanager.core import (
    IncompleteData,
    IndexOutOfRange,
    InvalidTransition,
    MissingParty,
    ParseFailure,
    PartyRecord,
    PrerequisiteMissing,
    ReportRow,
    RouteManagerError,
    SalesRecord,
    TemplateColumnSet,
    configure_logging,
    normalize_name,
)
from routemanager.ingestion import extract_coordinates, load_master, load_sales, load_template
from routemanager.processing.reconcile import find_missing
from routemanager.processing.pipeline import run_pipeline
from routemanager.reporting import REPORT_HEADERS, project, write_excel
from routemanager.review import GapFillSession

__all__ = [
    "REPORT_HEADERS",
    "GapFillSession",
    "IncompleteData",
    "IndexOutOfRange",
    "InvalidTransition",
    "MissingParty",
    "ParseFailure",
    "PartyRecord",
    "PrerequisiteMissing",
    "ReportRow",
    "RouteManagerError",
    "SalesRecord",
    "TemplateColumnSet",
    "configure_logging",
    "extract_coordinates",
    "find_missing",
    "load_master",
    "load_sales",
    "load_template",
    "normalize_name",
    "project",
    "run_pipeline",
    "write_excel",
]
