"""Applicant and score models."""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class ProcessedMarker(str, Enum):
    """Per-row transfer state of a raw intake row."""

    UNPROCESSED = "unprocessed"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def from_cell(
        cls,
        value,
        done_label: str = "Yes",
        in_progress_label: str = "Loading App Data",
    ) -> "ProcessedMarker":
        """Read a marker from the raw sheet's processed column."""
        if value == done_label:
            return cls.DONE
        if value == in_progress_label:
            return cls.IN_PROGRESS
        return cls.UNPROCESSED


class ApplicantRecord(BaseModel):
    """Applicant attributes read from one results row."""

    org_name: str = ""
    cohort: str = ""
    partner: str = Field(default="", description="Partner organization flag, 'yes' when partnered")
    budget: str = Field(default="", description="Budget bracket label as chosen on the form")
    full_time: int = 0
    part_time: int = 0
    volunteers: int = 0
    roles: list[str] = Field(default_factory=list, max_length=4)
    time_commitment: str = ""
    form_completion: str = Field(default="", description="yes / half / no")

    @property
    def combined_roles(self) -> str:
        """All participant roles as a single text."""
        return ", ".join(self.roles)


class ScoreBreakdown(BaseModel):
    """Rubric sub-scores for one applicant."""

    partner: int = 0
    budget: int = 0
    full_time: int = 0
    part_time: int = 0
    volunteer: int = 0
    team: int = 0
    time_commitment: int = 0
    form_completion: int = 0

    @computed_field
    @property
    def total(self) -> int:
        """Composite score, always the sum of the current sub-scores."""
        return (
            self.partner
            + self.budget
            + self.full_time
            + self.part_time
            + self.volunteer
            + self.team
            + self.time_commitment
            + self.form_completion
        )

    def sub_scores(self) -> dict[str, int]:
        """Sub-scores keyed by field name, without the total."""
        return self.model_dump(exclude={"total"})
