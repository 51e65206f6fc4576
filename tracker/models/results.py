"""Run summaries returned by the pipelines."""

from pydantic import BaseModel, Field


class IngestResult(BaseModel):
    """Outcome of merging a survey batch into the ledger."""

    batch: str = Field(description="Label of the ingested batch (its sheet name)")
    cohort: str = ""
    cohort_year: str = ""
    copied: int = 0
    duplicates: int = 0


class TransferResult(BaseModel):
    """Outcome of moving raw intake rows into the results sheet."""

    transferred: int = 0
    skipped_done: int = 0
    skipped_in_progress: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_done + self.skipped_in_progress


class ScoringResult(BaseModel):
    """Outcome of scoring a selection of results rows."""

    start_row: int
    scored: int = 0
    totals: dict[int, int] = Field(
        default_factory=dict,
        description="Sheet row number -> composite score at scoring time",
    )
