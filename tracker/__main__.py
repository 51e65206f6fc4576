"""CLI entry point for the applicant tracker."""

import argparse
import logging
import sys
from pathlib import Path

from tracker.commands import init_workbook, run_ingest, run_scoring, run_transfer
from tracker.config import settings
from tracker.errors import TrackerError
from tracker.models.database import get_session
from tracker.notify import ConsoleNotifier
from tracker.store import SqlWorkbook, export_csv, import_csv

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracker",
        description="Applicant tracker - score applications and ingest survey responses",
    )
    parser.add_argument(
        "--db",
        default=None,
        help=f"Database URL (default: {settings.database_url})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create the working sheets if they are missing")
    sub.add_parser("sheets", help="List sheets in workbook order")

    score = sub.add_parser("score", help="Assign scores to a range of results rows")
    score.add_argument("--start-row", type=int, required=True, help="First sheet row to score")
    score.add_argument("--rows", type=int, default=1, help="Number of rows to score (default: 1)")

    ingest = sub.add_parser("ingest", help="Copy survey responses into the Master Tracker")
    ingest.add_argument(
        "--sheet",
        default=None,
        help="Survey sheet to ingest (default: first sheet that is not a working sheet)",
    )
    ingest.add_argument(
        "--delete-source",
        action="store_true",
        help="Remove the survey sheet once it has been ingested",
    )

    sub.add_parser("transfer", help="Move unprocessed raw applications to the results sheet")

    imp = sub.add_parser("import-csv", help="Load a CSV file as a new sheet")
    imp.add_argument("path", type=Path)
    imp.add_argument("--sheet", required=True, help="Name for the new sheet")
    imp.add_argument("--header-row", type=int, default=1, help="Row holding the headers (default: 1)")

    exp = sub.add_parser("export-csv", help="Write a sheet to CSV with totals evaluated")
    exp.add_argument("sheet")
    exp.add_argument("path", type=Path)

    return parser


def run_command(args: argparse.Namespace, workbook: SqlWorkbook) -> None:
    notifier = ConsoleNotifier()

    if args.command == "init":
        created = init_workbook(workbook)
        print(f"Created: {', '.join(created)}" if created else "All working sheets already exist.")
    elif args.command == "sheets":
        for name in workbook.table_names():
            table = workbook.table(name)
            print(f"{name}\t{len(table.data_row_numbers())} row(s)")
    elif args.command == "score":
        run_scoring(workbook, args.start_row, args.rows, notifier=notifier)
    elif args.command == "ingest":
        run_ingest(workbook, sheet=args.sheet, delete_source=args.delete_source, notifier=notifier)
    elif args.command == "transfer":
        run_transfer(workbook, notifier=notifier)
    elif args.command == "import-csv":
        if not args.path.exists():
            raise TrackerError(f"CSV file not found: {args.path}")
        import_csv(workbook, args.path, args.sheet, header_row=args.header_row)
    elif args.command == "export-csv":
        rows = export_csv(workbook.table(args.sheet), args.path)
        print(f"Wrote {rows} row(s) to {args.path}")


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    workbook = SqlWorkbook(get_session(args.db))
    try:
        run_command(args, workbook)
    except TrackerError as e:
        # Commands have already told the user
        logger.debug(f"{args.command} aborted: {e}")
        if args.command in ("init", "sheets", "import-csv", "export-csv"):
            logger.error(str(e))
        sys.exit(1)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        workbook.close()


if __name__ == "__main__":
    main()
