"""Resolve named fields out of sheet rows."""

import logging
import re
from typing import Any, Iterable, Optional

from tracker.errors import MissingColumnError

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(value: Any, default: int = 0) -> int:
    """Parse the leading integer of a cell, or return ``default``.

    "12 staff" reads as 12, 7.9 as 7, "about 5" as the default.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else default
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


def as_text(value: Any, default: str = "") -> str:
    """Cell as a string; blank cells become ``default``."""
    if value is None or value == "":
        return default
    return str(value)


class HeaderIndex:
    """Header label -> column position, built once per sheet read.

    Lookups are exact string matches. When a label appears twice the first
    occurrence wins. Unknown labels resolve to nothing and the accessors fall
    back to their defaults, so one renamed optional column never aborts a run.
    """

    def __init__(self, headers: Iterable[Any], sheet: str = ""):
        self.headers = ["" if h is None else str(h) for h in headers]
        self.sheet = sheet
        self._positions: dict[str, int] = {}
        for position, header in enumerate(self.headers):
            self._positions.setdefault(header, position)

    @classmethod
    def for_table(cls, table) -> "HeaderIndex":
        return cls(table.get_header_row(), sheet=table.name)

    def __contains__(self, name: str) -> bool:
        return name in self._positions

    def __len__(self) -> int:
        return len(self.headers)

    def position(self, name: str) -> Optional[int]:
        """0-based position of ``name``, or None."""
        return self._positions.get(name)

    def column(self, name: str) -> Optional[int]:
        """1-based sheet column of ``name``, or None."""
        position = self.position(name)
        return None if position is None else position + 1

    def require(self, *names: str) -> None:
        """Raise ``MissingColumnError`` listing every absent label."""
        missing = [n for n in names if n not in self._positions]
        if missing:
            raise MissingColumnError(missing, sheet=self.sheet)

    def missing(self, names: Iterable[str]) -> list[str]:
        return [n for n in names if n not in self._positions]

    def value(self, row: list[Any], name: str, default: Any = "") -> Any:
        """Raw cell for ``name`` in ``row``; blank or unresolved gives ``default``."""
        position = self._positions.get(name)
        if position is None or position >= len(row):
            return default
        cell = row[position]
        if cell is None or cell == "":
            return default
        return cell

    def text(self, row: list[Any], name: str, default: str = "") -> str:
        return as_text(self.value(row, name, None), default)

    def integer(self, row: list[Any], name: str, default: int = 0) -> int:
        return parse_int(self.value(row, name, None), default)

    def build_row(self, values: dict[str, Any]) -> list[Any]:
        """Lay ``values`` out by header; uncovered columns stay blank.

        Labels not present in the header are dropped.
        """
        row: list[Any] = [""] * len(self.headers)
        for name, value in values.items():
            position = self._positions.get(name)
            if position is None:
                logger.debug(f"No '{name}' column in '{self.sheet}', value dropped")
                continue
            row[position] = value
        return row
