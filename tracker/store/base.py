"""Abstract interfaces for row-oriented sheets and the workbook holding them."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .formula import evaluate


def is_blank_row(cells: list[Any]) -> bool:
    """True when no cell of the row holds a value."""
    return all(cell is None or cell == "" for cell in cells)


class Table(ABC):
    """A sheet of rows addressed by 1-based row and column numbers.

    Rows above ``header_row`` are preamble (titles, notes); rows below it
    are data.
    """

    name: str = "table"
    header_row: int = 1

    @abstractmethod
    def get_row(self, row: int) -> list[Any]:
        """Return the raw cells of one row; empty list past the end."""
        pass

    @abstractmethod
    def get_cell(self, row: int, column: int) -> Any:
        """Return one raw cell; ``None`` when the cell was never written."""
        pass

    @abstractmethod
    def set_cell(self, row: int, column: int, value: Any) -> None:
        """Write one cell, growing the sheet as needed."""
        pass

    @abstractmethod
    def append_row(self, values: list[Any]) -> int:
        """Write ``values`` after the last non-empty row and return its number."""
        pass

    @abstractmethod
    def last_row_index(self) -> int:
        """Number of the last row holding any non-empty cell, 0 if none."""
        pass

    def get_header_row(self) -> list[str]:
        """Header labels, blanks as empty strings."""
        return ["" if cell is None else str(cell) for cell in self.get_row(self.header_row)]

    def data_row_numbers(self) -> range:
        """Sheet row numbers of all data rows."""
        return range(self.header_row + 1, self.last_row_index() + 1)

    def get_rows(self) -> list[list[Any]]:
        """Raw cells of every data row, in sheet order."""
        return [self.get_row(row) for row in self.data_row_numbers()]

    def get_value(self, row: int, column: int) -> Any:
        """Return a cell with any SUM formula evaluated."""
        return evaluate(self, self.get_cell(row, column))

    def get_values(self, row: int) -> list[Any]:
        """Return a row with formulas evaluated."""
        cells = self.get_row(row)
        return [evaluate(self, cell) for cell in cells]


class Workbook(ABC):
    """An ordered collection of named sheets."""

    @abstractmethod
    def table_names(self) -> list[str]:
        """Sheet names in workbook order."""
        pass

    @abstractmethod
    def table(self, name: str) -> Table:
        """Return a sheet by name or raise ``SheetNotFoundError``."""
        pass

    @abstractmethod
    def create_table(
        self,
        name: str,
        headers: list[str],
        header_row: int = 1,
        preamble: Optional[list[list[Any]]] = None,
    ) -> Table:
        """Add a sheet with ``headers`` on ``header_row``.

        ``preamble`` fills the rows above the header row.
        """
        pass

    @abstractmethod
    def delete_table(self, name: str) -> None:
        pass

    def has_table(self, name: str) -> bool:
        return name in self.table_names()

    @staticmethod
    def _preamble_rows(
        headers: list[str],
        header_row: int,
        preamble: Optional[list[list[Any]]],
    ) -> list[list[Any]]:
        """All rows up to and including the header row."""
        rows = [list(r) for r in (preamble or [])][: header_row - 1]
        while len(rows) < header_row - 1:
            rows.append([])
        rows.append(list(headers))
        return rows
