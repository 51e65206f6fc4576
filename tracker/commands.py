"""The user-facing operations, wired to a workbook and a notifier.

Each command runs one pipeline to completion and sends a single
notification. Abort-class errors are reported through the notifier and
re-raised for the caller.
"""

import logging
from typing import Optional

from tracker.config import Settings, settings as default_settings
from tracker.errors import SheetNotFoundError, TrackerError
from tracker.ingest import SurveyIngestor, transfer_unprocessed
from tracker.models import IngestResult, ScoringResult, TransferResult
from tracker.models import columns
from tracker.notify import (
    LogNotifier,
    Notifier,
    ingest_message,
    scoring_message,
    transfer_message,
)
from tracker.score import score_selection
from tracker.store import Workbook

logger = logging.getLogger(__name__)


def run_scoring(
    workbook: Workbook,
    start_row: Optional[int],
    num_rows: Optional[int],
    notifier: Optional[Notifier] = None,
    config: Optional[Settings] = None,
) -> ScoringResult:
    """Score the selected rows of the results sheet."""
    config = config or default_settings
    notifier = notifier or LogNotifier()
    try:
        result = score_selection(workbook.table(config.results_sheet), start_row, num_rows)
    except TrackerError as e:
        notifier.notify(str(e))
        raise
    notifier.notify(scoring_message(result))
    return result


def find_survey_sheet(workbook: Workbook, config: Optional[Settings] = None) -> str:
    """First sheet that is not one of the working sheets.

    The survey add-on drops each response batch in as a new sheet after the
    ledger and the waitlist.
    """
    config = config or default_settings
    for name in workbook.table_names():
        if name not in config.working_sheets:
            return name
    raise SheetNotFoundError("", "No survey response sheet found.")


def run_ingest(
    workbook: Workbook,
    sheet: Optional[str] = None,
    delete_source: bool = False,
    notifier: Optional[Notifier] = None,
    config: Optional[Settings] = None,
) -> IngestResult:
    """Merge a survey sheet into the ledger.

    ``sheet`` defaults to the first non-working sheet. With
    ``delete_source`` the survey sheet is removed once ingested.
    """
    config = config or default_settings
    notifier = notifier or LogNotifier()
    try:
        sheet = sheet or find_survey_sheet(workbook, config)
        source = workbook.table(sheet)
        ledger = workbook.table(config.ledger_sheet)
        result = SurveyIngestor().ingest(sheet, source, ledger)
    except TrackerError as e:
        notifier.notify(str(e))
        raise

    if delete_source:
        workbook.delete_table(sheet)
        logger.info(f"Removed ingested sheet '{sheet}'")

    notifier.notify(ingest_message(result))
    return result


def run_transfer(
    workbook: Workbook,
    notifier: Optional[Notifier] = None,
    config: Optional[Settings] = None,
) -> TransferResult:
    """Move unprocessed raw applications into the results sheet."""
    config = config or default_settings
    notifier = notifier or LogNotifier()
    try:
        result = transfer_unprocessed(
            workbook.table(config.raw_sheet),
            workbook.table(config.results_sheet),
            config,
        )
    except TrackerError as e:
        notifier.notify(str(e))
        raise
    notifier.notify(transfer_message(result))
    return result


def init_workbook(workbook: Workbook, config: Optional[Settings] = None) -> list[str]:
    """Create any missing working sheet with its standard headers."""
    config = config or default_settings
    layouts = [
        (config.ledger_sheet, columns.LEDGER_HEADERS, config.ledger_header_row, [[columns.LEDGER_TITLE]]),
        (config.results_sheet, columns.RESULTS_HEADERS, 1, None),
        (config.raw_sheet, columns.RAW_HEADERS, 1, None),
    ]
    created = []
    for name, headers, header_row, preamble in layouts:
        if workbook.has_table(name):
            continue
        workbook.create_table(name, headers, header_row=header_row, preamble=preamble)
        created.append(name)
        logger.info(f"Created sheet '{name}'")
    return created
