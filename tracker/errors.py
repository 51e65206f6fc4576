"""Exceptions raised when a tracker operation has to abort."""

from typing import Optional


class TrackerError(Exception):
    """Base class for abort-class errors reported to the user."""


class MissingSelectionError(TrackerError):
    """No rows were designated for scoring."""

    def __init__(self, message: str = "Please select a range of rows to process."):
        super().__init__(message)


class MissingColumnError(TrackerError):
    """A structurally required column is absent from a sheet."""

    def __init__(self, columns: list[str], sheet: str = ""):
        self.columns = list(columns)
        self.sheet = sheet
        names = ", ".join(self.columns)
        where = f" in '{sheet}'" if sheet else ""
        noun = "column" if len(self.columns) == 1 else "columns"
        super().__init__(f"{names} {noun} not found{where}.")


class SheetNotFoundError(TrackerError):
    """A named sheet does not exist in the workbook."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Sheet '{name}' not found.")


class LedgerLayoutError(TrackerError):
    """Score columns are laid out so that a live total cannot be written."""
