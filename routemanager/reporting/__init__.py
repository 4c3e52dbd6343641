"""Report projection and export sinks."""
from routemanager.reporting.sinks import (
    REPORT_FILE_NAME,
    REPORT_SHEET,
    excel_bytes,
    write_csv,
    write_excel,
)
from routemanager.reporting.templates import (
    REPORT_HEADERS,
    project,
    report_row_to_template_row,
    report_rows_to_dicts,
)

__all__ = [
    "REPORT_FILE_NAME",
    "REPORT_HEADERS",
    "REPORT_SHEET",
    "excel_bytes",
    "project",
    "report_row_to_template_row",
    "report_rows_to_dicts",
    "write_csv",
    "write_excel",
]
