"""Field lookup and free-text parsing."""

from .fields import HeaderIndex, parse_int, as_text
from .labels import parse_cohort, parse_year, split_name_role

__all__ = [
    "HeaderIndex",
    "parse_int",
    "as_text",
    "parse_cohort",
    "parse_year",
    "split_name_role",
]
