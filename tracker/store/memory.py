"""In-memory workbook, used for tests and CSV round trips."""

from typing import Any, Optional

from tracker.errors import SheetNotFoundError
from .base import Table, Workbook, is_blank_row


class MemoryTable(Table):
    """Sheet held as a list of Python lists."""

    def __init__(self, name: str, rows: Optional[list[list[Any]]] = None, header_row: int = 1):
        self.name = name
        self.header_row = header_row
        self._rows: list[list[Any]] = [list(r) for r in (rows or [])]

    def get_row(self, row: int) -> list[Any]:
        if row < 1 or row > len(self._rows):
            return []
        return list(self._rows[row - 1])

    def get_cell(self, row: int, column: int) -> Any:
        cells = self.get_row(row)
        if column < 1 or column > len(cells):
            return None
        return cells[column - 1]

    def set_cell(self, row: int, column: int, value: Any) -> None:
        if row < 1 or column < 1:
            raise IndexError(f"Cell ({row}, {column}) is outside the sheet")
        while len(self._rows) < row:
            self._rows.append([])
        cells = self._rows[row - 1]
        while len(cells) < column:
            cells.append("")
        cells[column - 1] = value

    def append_row(self, values: list[Any]) -> int:
        row = self.last_row_index() + 1
        while len(self._rows) < row:
            self._rows.append([])
        self._rows[row - 1] = list(values)
        return row

    def last_row_index(self) -> int:
        for index in range(len(self._rows), 0, -1):
            if not is_blank_row(self._rows[index - 1]):
                return index
        return 0


class MemoryWorkbook(Workbook):
    """Workbook keeping its sheets in a dict, in insertion order."""

    def __init__(self, tables: Optional[list[MemoryTable]] = None):
        self._tables: dict[str, MemoryTable] = {}
        for table in tables or []:
            self._tables[table.name] = table

    def table_names(self) -> list[str]:
        return list(self._tables)

    def table(self, name: str) -> MemoryTable:
        if name not in self._tables:
            raise SheetNotFoundError(name)
        return self._tables[name]

    def add_table(self, table: MemoryTable) -> MemoryTable:
        self._tables[table.name] = table
        return table

    def create_table(
        self,
        name: str,
        headers: list[str],
        header_row: int = 1,
        preamble: Optional[list[list[Any]]] = None,
    ) -> MemoryTable:
        if name in self._tables:
            raise ValueError(f"Sheet '{name}' already exists")
        rows = self._preamble_rows(headers, header_row, preamble)
        return self.add_table(MemoryTable(name, rows, header_row=header_row))

    def delete_table(self, name: str) -> None:
        if name not in self._tables:
            raise SheetNotFoundError(name)
        del self._tables[name]
