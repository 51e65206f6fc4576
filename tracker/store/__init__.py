"""Row-oriented sheet storage."""

from .base import Table, Workbook, is_blank_row
from .memory import MemoryTable, MemoryWorkbook
from .sql import SqlTable, SqlWorkbook
from .csv_io import import_csv, export_csv

__all__ = [
    "Table",
    "Workbook",
    "is_blank_row",
    "MemoryTable",
    "MemoryWorkbook",
    "SqlTable",
    "SqlWorkbook",
    "import_csv",
    "export_csv",
]
