"""Data ingestion package for master, sales, and template spreadsheets."""
from routemanager.ingestion.common import read_rows, read_table
from routemanager.ingestion.coordinates import Coordinates, extract_coordinates
from routemanager.ingestion.loader import (
    load_master,
    load_sales,
    load_template,
    rows_to_master,
    rows_to_sales,
    rows_to_template,
)

__all__ = [
    "Coordinates",
    "extract_coordinates",
    "load_master",
    "load_sales",
    "load_template",
    "read_rows",
    "read_table",
    "rows_to_master",
    "rows_to_sales",
    "rows_to_template",
]
