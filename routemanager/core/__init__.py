"""Core building blocks for the route manager package."""
from routemanager.core.errors import (
    IncompleteData,
    IndexOutOfRange,
    InvalidTransition,
    ParseFailure,
    PrerequisiteMissing,
    RouteManagerError,
)
from routemanager.core.logging import configure_logging
from routemanager.core.models import (
    MissingParty,
    PartyRecord,
    ReportRow,
    SalesRecord,
    TemplateColumnSet,
)
from routemanager.core.normalize import normalize_name, to_text

__all__ = [
    "configure_logging",
    "IncompleteData",
    "IndexOutOfRange",
    "InvalidTransition",
    "ParseFailure",
    "PrerequisiteMissing",
    "RouteManagerError",
    "MissingParty",
    "PartyRecord",
    "ReportRow",
    "SalesRecord",
    "TemplateColumnSet",
    "normalize_name",
    "to_text",
]
