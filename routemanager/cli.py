"""Command line entry point for generating a route report from spreadsheets."""
import argparse
from pathlib import Path

from routemanager.core.logging import configure_logging
from routemanager.core.utils import get_config_value
from routemanager.processing.pipeline import run_pipeline
from routemanager.reporting.sinks import REPORT_FILE_NAME


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Reconcile sales against the master list and build a route report")
    parser.add_argument("--master", type=Path, required=True, help="Master party file (CSV/XLSX)")
    parser.add_argument("--sales", type=Path, required=True, help="Current sales file (CSV/XLSX)")
    parser.add_argument("--template", type=Path, help="Report template file used to confirm the layout")
    parser.add_argument(
        "--fills",
        type=Path,
        help="CSV/XLSX with Party Name, Phone No. and Address for parties missing from the master",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(get_config_value("ROUTE_REPORT_OUTPUT", f"output/{REPORT_FILE_NAME}")),
        help="Report file to write",
    )
    parser.add_argument(
        "--sink",
        choices=["excel", "csv"],
        default="excel",
        help="Output format for the report",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of continuing when missing parties have no address",
    )
    return parser


def main() -> None:
    """Entrypoint for running the pipeline from the command line."""

    configure_logging()
    args = build_parser().parse_args()
    output_path = run_pipeline(
        args.master,
        args.sales,
        args.output,
        template_path=args.template,
        fills_path=args.fills,
        sink=args.sink,
        allow_incomplete=not args.strict,
    )
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
