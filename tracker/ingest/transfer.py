"""Move raw application rows into the results sheet, once each."""

import logging
from typing import Optional

from tracker.config import Settings, settings as default_settings
from tracker.extract import HeaderIndex
from tracker.models import ProcessedMarker, TransferResult
from tracker.models import columns
from tracker.score import score_column_span
from tracker.store import Table
from tracker.store.formula import sum_formula

logger = logging.getLogger(__name__)


def transfer_unprocessed(
    raw: Table,
    results: Table,
    config: Optional[Settings] = None,
) -> TransferResult:
    """Append every unprocessed raw row to ``results`` and mark it done.

    Rows marked done, or still being filled in by the form integration, are
    left alone. A row marked done is never transferred again, even if its
    answers change later; clearing the marker re-queues it.
    """
    config = config or default_settings
    raw_index = HeaderIndex.for_table(raw)
    results_index = HeaderIndex.for_table(results)

    raw_index.require(columns.RAW_PROCESSED)
    results_index.require(columns.STATUS)
    first, last = score_column_span(results_index)
    marker_column = raw_index.column(columns.RAW_PROCESSED)

    result = TransferResult()

    for row_number in raw.data_row_numbers():
        row = raw.get_row(row_number)
        marker = ProcessedMarker.from_cell(
            raw_index.value(row, columns.RAW_PROCESSED, None),
            done_label=config.processed_done_label,
            in_progress_label=config.processed_in_progress_label,
        )
        if marker is ProcessedMarker.DONE:
            result.skipped_done += 1
            continue
        if marker is ProcessedMarker.IN_PROGRESS:
            result.skipped_in_progress += 1
            logger.debug(f"Raw row {row_number} is still loading, skipped")
            continue

        target_row = results.last_row_index() + 1
        values = {
            columns.SCORE: sum_formula(first, last, target_row),
            columns.STATUS: config.pending_status,
        }
        for question, results_column in columns.RAW_TO_RESULTS.items():
            values[results_column] = raw_index.value(row, question, "")

        results.append_row(results_index.build_row(values))
        raw.set_cell(row_number, marker_column, config.processed_done_label)
        result.transferred += 1
        logger.debug(f"Raw row {row_number} -> results row {target_row}")

    logger.info(
        f"Transferred {result.transferred} row(s) from '{raw.name}' to '{results.name}', "
        f"skipped {result.skipped_done} done and {result.skipped_in_progress} loading"
    )
    return result
