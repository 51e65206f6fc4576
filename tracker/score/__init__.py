"""Scoring engine for applicant organizations."""

from .scorer import Scorer
from .rules import Rule, RuleCascade
from .writer import score_selection, score_column_span

__all__ = ["Scorer", "Rule", "RuleCascade", "score_selection", "score_column_span"]
