"""Load sheets from CSV exports and write them back out."""

import csv
import logging
from pathlib import Path

from .base import Table, Workbook

logger = logging.getLogger(__name__)


def import_csv(
    workbook: Workbook,
    path: Path,
    sheet: str,
    header_row: int = 1,
) -> Table:
    """Create ``sheet`` in ``workbook`` from a CSV file.

    Row ``header_row`` of the file becomes the header row; rows above it
    are kept as preamble.
    """
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        rows = [row for row in csv.reader(f)]

    if len(rows) < header_row:
        raise ValueError(f"{path} has no header row {header_row}")

    table = workbook.create_table(
        sheet,
        headers=rows[header_row - 1],
        header_row=header_row,
        preamble=rows[: header_row - 1],
    )
    for row in rows[header_row:]:
        table.append_row(row)

    logger.info(f"Imported {len(rows) - header_row} rows from {path} into '{sheet}'")
    return table


def export_csv(table: Table, path: Path) -> int:
    """Write every row of ``table`` to ``path`` with formulas evaluated."""
    path.parent.mkdir(parents=True, exist_ok=True)
    last = table.last_row_index()

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        for row in range(1, last + 1):
            writer.writerow(["" if v is None else v for v in table.get_values(row)])

    return last
