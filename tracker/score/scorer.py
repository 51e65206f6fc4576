"""Scoring engine for applicant organizations."""

import logging

from tracker.extract import HeaderIndex
from tracker.models import ApplicantRecord, ScoreBreakdown
from tracker.models import columns
from . import rules

logger = logging.getLogger(__name__)


class Scorer:
    """Score applicants against the fixed rubric.

    Scoring is pure: the same record always yields the same breakdown.
    """

    def score(self, applicant: ApplicantRecord) -> ScoreBreakdown:
        """Compute all eight sub-scores for one applicant."""
        return ScoreBreakdown(
            partner=rules.partner_score(applicant.partner),
            budget=rules.budget_score(applicant.budget),
            full_time=rules.headcount_score(applicant.full_time),
            part_time=rules.headcount_score(applicant.part_time),
            volunteer=rules.headcount_score(applicant.volunteers),
            team=rules.team_score(applicant.combined_roles),
            time_commitment=rules.time_commitment_score(applicant.time_commitment),
            form_completion=rules.form_completion_score(applicant.form_completion),
        )

    def score_all(self, applicants: list[ApplicantRecord]) -> list[ScoreBreakdown]:
        return [self.score(applicant) for applicant in applicants]

    @staticmethod
    def read_applicant(index: HeaderIndex, row: list) -> ApplicantRecord:
        """Build an applicant from a results row, defaulting missing fields."""
        return ApplicantRecord(
            org_name=index.text(row, columns.ORG_NAME),
            cohort=index.text(row, columns.COHORT),
            partner=index.text(row, columns.PARTNER),
            budget=index.text(row, columns.BUDGET),
            full_time=index.integer(row, columns.FULL_TIME),
            part_time=index.integer(row, columns.PART_TIME),
            volunteers=index.integer(row, columns.VOLUNTEERS),
            roles=[index.text(row, name) for name in columns.PARTICIPANT_ROLES],
            time_commitment=index.text(row, columns.TIME_COMMITMENT),
            form_completion=index.text(row, columns.APP_FORM),
        )
