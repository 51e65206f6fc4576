"""Write rubric scores back into the results sheet."""

import logging
from typing import Optional

from tracker.errors import LedgerLayoutError, MissingSelectionError
from tracker.extract import HeaderIndex
from tracker.models import ScoringResult
from tracker.models import columns
from tracker.store import Table
from tracker.store.formula import sum_formula
from .scorer import Scorer

logger = logging.getLogger(__name__)


def score_column_span(index: HeaderIndex) -> tuple[int, int]:
    """First and last sheet column of the eight sub-score columns.

    The composite is a SUM over this span, so the sub-score columns must sit
    side by side. Raises ``MissingColumnError`` or ``LedgerLayoutError``.
    """
    index.require(columns.SCORE, *columns.SUB_SCORE_COLUMNS.values())
    positions = [index.column(name) for name in columns.SUB_SCORE_COLUMNS.values()]
    first, last = min(positions), max(positions)
    if last - first + 1 != len(positions):
        raise LedgerLayoutError(
            f"Score columns in '{index.sheet}' must be adjacent to keep the total live."
        )
    return first, last


def score_selection(
    table: Table,
    start_row: Optional[int],
    num_rows: Optional[int],
    scorer: Optional[Scorer] = None,
) -> ScoringResult:
    """Score rows ``start_row .. start_row + num_rows - 1`` of ``table``.

    Header and preamble rows inside the selection are skipped, as are rows
    past the last filled row. Every check runs before the first write.
    """
    if start_row is None or num_rows is None or num_rows < 1:
        raise MissingSelectionError()

    scorer = scorer or Scorer()
    index = HeaderIndex.for_table(table)
    first, last = score_column_span(index)

    begin = max(start_row, table.header_row + 1)
    end = min(start_row + num_rows - 1, table.last_row_index())
    if begin > end:
        raise MissingSelectionError("The selected range holds no applicant rows.")

    total_column = index.column(columns.SCORE)
    result = ScoringResult(start_row=begin)

    for row_number in range(begin, end + 1):
        applicant = scorer.read_applicant(index, table.get_row(row_number))
        breakdown = scorer.score(applicant)

        table.set_cell(row_number, total_column, sum_formula(first, last, row_number))
        for field_name, score in breakdown.sub_scores().items():
            column_name = columns.SUB_SCORE_COLUMNS[field_name]
            table.set_cell(row_number, index.column(column_name), score)

        result.totals[row_number] = breakdown.total
        result.scored += 1
        logger.debug(f"Row {row_number} ({applicant.org_name or 'unnamed'}): {breakdown.total}")

    logger.info(f"Scored {result.scored} row(s) in '{table.name}'")
    return result
