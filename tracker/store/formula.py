"""A1-style column letters and the live SUM formula used for totals."""

import re
from typing import Any

SUM_PATTERN = re.compile(r"^=SUM\(([A-Z]+)(\d+):([A-Z]+)(\d+)\)$")

# Formulas referencing formulas are followed this deep before giving up
MAX_DEPTH = 8


def column_letter(column: int) -> str:
    """Convert a 1-based column number to its letter (1 -> A, 27 -> AA)."""
    if column < 1:
        raise ValueError(f"Column numbers start at 1, got {column}")
    letters = ""
    while column:
        column, remainder = divmod(column - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def column_number(letters: str) -> int:
    """Convert column letters to a 1-based column number (AC -> 29)."""
    number = 0
    for char in letters.upper():
        number = number * 26 + (ord(char) - ord("A") + 1)
    return number


def sum_formula(first_column: int, last_column: int, row: int) -> str:
    """Build a SUM over one row between two columns, e.g. =SUM(V5:AC5)."""
    return f"=SUM({column_letter(first_column)}{row}:{column_letter(last_column)}{row})"


def is_formula(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("=")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def evaluate(table, value: Any, depth: int = 0) -> Any:
    """Evaluate a cell value against the table it lives in.

    Only the SUM range form is understood. Text and blank cells in the range
    are ignored, as spreadsheet SUM does. Anything else is returned unchanged.
    """
    if not isinstance(value, str):
        return value
    match = SUM_PATTERN.match(value)
    if not match or depth >= MAX_DEPTH:
        return value

    first_col, first_row, last_col, last_row = match.groups()
    cols = sorted((column_number(first_col), column_number(last_col)))
    rows = sorted((int(first_row), int(last_row)))

    total = 0
    for row in range(rows[0], rows[1] + 1):
        for column in range(cols[0], cols[1] + 1):
            cell = evaluate(table, table.get_cell(row, column), depth + 1)
            if _is_number(cell):
                total += cell
    return total
