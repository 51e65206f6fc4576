"""Data models for the applicant tracker."""

from .applicant import (
    ApplicantRecord,
    ScoreBreakdown,
    ProcessedMarker,
)
from .results import (
    IngestResult,
    TransferResult,
    ScoringResult,
)

__all__ = [
    "ApplicantRecord",
    "ScoreBreakdown",
    "ProcessedMarker",
    "IngestResult",
    "TransferResult",
    "ScoringResult",
]
