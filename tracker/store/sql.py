"""Workbook persisted in SQLite through SQLAlchemy."""

import logging
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from tracker.errors import SheetNotFoundError
from tracker.models.database import DBSheet, DBSheetRow
from .base import Table, Workbook, is_blank_row

logger = logging.getLogger(__name__)

SCAN_BATCH_SIZE = 100


class SqlTable(Table):
    """Sheet whose rows live in the ``sheet_rows`` table.

    Every write is committed on its own; there is no multi-row transaction.
    """

    def __init__(self, session: Session, sheet: DBSheet):
        self.session = session
        self.sheet_id = sheet.id
        self.name = sheet.name
        self.header_row = sheet.header_row

    def _fetch(self, row: int) -> Optional[DBSheetRow]:
        return (
            self.session.query(DBSheetRow)
            .filter_by(sheet_id=self.sheet_id, row_number=row)
            .first()
        )

    def get_row(self, row: int) -> list[Any]:
        record = self._fetch(row)
        return record.get_cells() if record else []

    def get_cell(self, row: int, column: int) -> Any:
        cells = self.get_row(row)
        if column < 1 or column > len(cells):
            return None
        return cells[column - 1]

    def get_rows(self) -> list[list[Any]]:
        last = self.last_row_index()
        records = (
            self.session.query(DBSheetRow)
            .filter(
                DBSheetRow.sheet_id == self.sheet_id,
                DBSheetRow.row_number > self.header_row,
                DBSheetRow.row_number <= last,
            )
            .order_by(DBSheetRow.row_number)
            .all()
        )
        by_number = {r.row_number: r.get_cells() for r in records}
        # Sparse rows read back as empty, like blank sheet rows
        return [by_number.get(n, []) for n in range(self.header_row + 1, last + 1)]

    def set_cell(self, row: int, column: int, value: Any) -> None:
        if row < 1 or column < 1:
            raise IndexError(f"Cell ({row}, {column}) is outside the sheet")
        record = self._fetch(row)
        if record is None:
            record = DBSheetRow(sheet_id=self.sheet_id, row_number=row)
            self.session.add(record)
            cells = []
        else:
            cells = record.get_cells()
        while len(cells) < column:
            cells.append("")
        cells[column - 1] = value
        record.set_cells(cells)
        self.session.commit()

    def append_row(self, values: list[Any]) -> int:
        row = self.last_row_index() + 1
        record = self._fetch(row)
        if record is None:
            record = DBSheetRow(sheet_id=self.sheet_id, row_number=row)
            self.session.add(record)
        record.set_cells(list(values))
        self.session.commit()
        return row

    def last_row_index(self) -> int:
        query = (
            self.session.query(DBSheetRow)
            .filter_by(sheet_id=self.sheet_id)
            .order_by(DBSheetRow.row_number.desc())
        )
        # Scan from the bottom, one batch at a time
        offset = 0
        while True:
            records = query.offset(offset).limit(SCAN_BATCH_SIZE).all()
            if not records:
                return 0
            for record in records:
                if not is_blank_row(record.get_cells()):
                    return record.row_number
            offset += len(records)


class SqlWorkbook(Workbook):
    """Workbook backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def _sheet(self, name: str) -> Optional[DBSheet]:
        return self.session.query(DBSheet).filter_by(name=name).first()

    def table_names(self) -> list[str]:
        sheets = self.session.query(DBSheet).order_by(DBSheet.position, DBSheet.id).all()
        return [s.name for s in sheets]

    def table(self, name: str) -> SqlTable:
        sheet = self._sheet(name)
        if sheet is None:
            raise SheetNotFoundError(name)
        return SqlTable(self.session, sheet)

    def create_table(
        self,
        name: str,
        headers: list[str],
        header_row: int = 1,
        preamble: Optional[list[list[Any]]] = None,
    ) -> SqlTable:
        if self._sheet(name) is not None:
            raise ValueError(f"Sheet '{name}' already exists")

        position = self.session.query(func.coalesce(func.max(DBSheet.position), -1)).scalar() + 1
        sheet = DBSheet(name=name, position=position, header_row=header_row)
        self.session.add(sheet)
        self.session.flush()

        for number, cells in enumerate(self._preamble_rows(headers, header_row, preamble), 1):
            record = DBSheetRow(sheet_id=sheet.id, row_number=number)
            record.set_cells(cells)
            self.session.add(record)
        self.session.commit()

        logger.debug(f"Created sheet '{name}' at position {position}")
        return SqlTable(self.session, sheet)

    def delete_table(self, name: str) -> None:
        sheet = self._sheet(name)
        if sheet is None:
            raise SheetNotFoundError(name)
        self.session.delete(sheet)
        self.session.commit()
        logger.debug(f"Deleted sheet '{name}'")

    def close(self):
        self.session.close()
