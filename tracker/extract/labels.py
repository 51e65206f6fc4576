"""Parsers for free-text batch labels and name/role answers."""

import re
from typing import Any

# "Victoria Spring 2021 Applications" -> region, season, year
COHORT_PATTERN = re.compile(r"^(?:(.*?)\s+)?(Winter|Spring|Summer|Fall)\s+(\d{4})")
YEAR_PATTERN = re.compile(r"(\d{4})")

NAME_ROLE_SEPARATORS = (",", "-")


def parse_cohort(label: str) -> str:
    """Extract "<region> <season> <year>" from a batch label.

    The region is optional and dropped with its space when absent. Season
    names are matched case-sensitively. Returns "" when no season and year
    are found.
    """
    match = COHORT_PATTERN.match(label or "")
    if not match:
        return ""
    region, season, year = match.groups()
    prefix = f"{region} " if region else ""
    return f"{prefix}{season} {year}"


def parse_year(cohort: str) -> str:
    """First 4-digit run in ``cohort``, or ""."""
    match = YEAR_PATTERN.search(cohort or "")
    return match.group(1) if match else ""


def split_name_role(text: Any) -> tuple[str, str]:
    """Split "Jane Doe, Executive Director" or "Jane Doe - Staff".

    The first comma wins; without one the first dash is used. Hyphenated
    names split at the hyphen, which is accepted for free-text input.
    """
    if text is None:
        return "", ""
    text = str(text)
    for separator in NAME_ROLE_SEPARATORS:
        index = text.find(separator)
        if index != -1:
            return text[:index].strip(), text[index + 1:].strip()
    return text, ""
