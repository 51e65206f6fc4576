"""Tests for scoring functionality."""

import pytest

from tracker.extract import HeaderIndex
from tracker.models import ApplicantRecord, ScoreBreakdown
from tracker.models import columns
from tracker.score import Rule, RuleCascade, Scorer
from tracker.score import rules


def make_applicant(**kwargs) -> ApplicantRecord:
    """Create a test applicant with defaults."""
    defaults = {
        "org_name": "Harbour Food Bank",
        "cohort": "Victoria Spring 2021",
        "partner": "Yes",
        "budget": "$250,001 - $500,000",
        "full_time": 8,
        "part_time": 3,
        "volunteers": 40,
        "roles": ["Executive Director", "Board Member", "", ""],
        "time_commitment": "yes",
        "form_completion": "Half",
    }
    defaults.update(kwargs)
    return ApplicantRecord(**defaults)


class TestHeadcountScore:
    """Tests for the staff and volunteer brackets."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, 2), (5, 2), (6, 3), (10, 3), (11, 4), (20, 4), (21, 5)],
    )
    def test_bracket_boundaries(self, count, expected):
        assert rules.headcount_score(count) == expected

    def test_negative_count(self):
        assert rules.headcount_score(-1) == 1

    def test_monotonic(self):
        scores = [rules.headcount_score(n) for n in range(-5, 40)]
        assert scores == sorted(scores)


class TestTeamScore:
    """Tests for the team seniority cascade."""

    def test_director_and_board(self):
        assert rules.team_score("Board Member, Executive Director") == 5

    def test_board_only(self):
        assert rules.team_score("Board Member") == 4

    def test_director_only(self):
        assert rules.team_score("Executive Director") == 3

    def test_staff(self):
        assert rules.team_score("Staff") == 2

    def test_senior_staff(self):
        assert rules.team_score("Senior Staff") == 2

    def test_volunteer(self):
        assert rules.team_score("Volunteer") == 1

    def test_no_roles(self):
        assert rules.team_score("") == 0

    def test_priority_staff_over_volunteer(self):
        assert rules.team_score("Volunteer, Staff") == 2

    def test_priority_board_over_staff(self):
        assert rules.team_score("Staff, Volunteer, Board Member") == 4

    def test_case_sensitive(self):
        assert rules.team_score("executive director, board member") == 0


class TestCategoricalScores:
    """Tests for partner, budget, time commitment and form completion."""

    def test_partner_yes_any_case(self):
        assert rules.partner_score("YES") == 5
        assert rules.partner_score("yes") == 5

    def test_partner_other(self):
        assert rules.partner_score("") == 1
        assert rules.partner_score("No") == 1

    @pytest.mark.parametrize(
        "bracket,expected",
        [
            ("$500,001 - 1,000,000", 5),
            ("$1,000,001 or more", 4),
            ("$250,001 - $500,000", 3),
            ("$100,001 - $250,000", 2),
            ("$0 - $100,000", 1),
        ],
    )
    def test_budget_brackets(self, bracket, expected):
        assert rules.budget_score(bracket) == expected

    def test_budget_en_dash_labels(self):
        assert rules.budget_score("$500,001–1,000,000") == 5
        assert rules.budget_score("$0–$100,000") == 1

    def test_budget_unknown(self):
        assert rules.budget_score("about $300k") == 0
        assert rules.budget_score("") == 0

    def test_time_commitment(self):
        assert rules.time_commitment_score("Yes") == 5
        assert rules.time_commitment_score("Maybe") == 1

    def test_form_completion(self):
        assert rules.form_completion_score("YES") == 5
        assert rules.form_completion_score("half") == 3
        assert rules.form_completion_score("No") == 1
        assert rules.form_completion_score("partly") == 0


class TestRuleCascade:
    """Tests for ordered rule evaluation."""

    def test_first_match_wins(self):
        cascade = RuleCascade(
            rules=[Rule("big", lambda n: n > 10, 3), Rule("positive", lambda n: n > 0, 1)],
            default=0,
        )
        assert cascade.evaluate(50) == 3
        assert cascade.evaluate(5) == 1
        assert cascade.evaluate(-5) == 0

    def test_match_reports_rule_name(self):
        assert rules.TEAM_CASCADE.match("Volunteer, Staff") == ("staff", 2)
        assert rules.TEAM_CASCADE.match("") == ("default", 0)


class TestScorer:
    """Tests for the scoring engine."""

    def test_full_breakdown(self):
        result = Scorer().score(make_applicant())
        assert result.partner == 5
        assert result.budget == 3
        assert result.full_time == 3
        assert result.part_time == 2
        assert result.volunteer == 5
        assert result.team == 5
        assert result.time_commitment == 5
        assert result.form_completion == 3
        assert result.total == 31

    def test_empty_applicant(self):
        result = Scorer().score(ApplicantRecord())
        # partner 1, budget 0, headcounts 2 each, team 0, time 1, form 0
        assert result.total == 1 + 0 + 2 + 2 + 2 + 0 + 1 + 0

    def test_total_is_sum(self):
        result = Scorer().score(make_applicant(budget="unknown", roles=["Volunteer"]))
        assert result.total == sum(result.sub_scores().values())

    def test_idempotent(self):
        scorer = Scorer()
        applicant = make_applicant()
        assert scorer.score(applicant) == scorer.score(applicant)

    def test_roles_combined(self):
        applicant = make_applicant(roles=["Board Member", "", "Executive Director", ""])
        assert Scorer().score(applicant).team == 5

    def test_score_all(self):
        results = Scorer().score_all([make_applicant(), ApplicantRecord()])
        assert [r.total for r in results] == [31, 8]


class TestScoreBreakdown:
    """Tests for the derived total."""

    def test_total_follows_sub_scores(self):
        breakdown = ScoreBreakdown(partner=5, budget=4)
        assert breakdown.total == 9
        breakdown.team = 3
        assert breakdown.total == 12

    def test_dump_includes_total(self):
        assert ScoreBreakdown(partner=1).model_dump()["total"] == 1

    def test_sub_scores_exclude_total(self):
        assert "total" not in ScoreBreakdown().sub_scores()
        assert len(ScoreBreakdown().sub_scores()) == 8


class TestReadApplicant:
    """Tests for building applicants from results rows."""

    def test_reads_named_columns(self):
        index = HeaderIndex(columns.RESULTS_HEADERS)
        row = index.build_row({
            columns.ORG_NAME: "Harbour Food Bank",
            columns.BUDGET: "$0 - $100,000",
            columns.FULL_TIME: "12",
            columns.VOLUNTEERS: "lots",
            columns.PARTICIPANT_ROLES[1]: "Staff",
            columns.APP_FORM: "yes",
        })
        applicant = Scorer.read_applicant(index, row)
        assert applicant.org_name == "Harbour Food Bank"
        assert applicant.full_time == 12
        assert applicant.volunteers == 0
        assert applicant.roles == ["", "Staff", "", ""]
        assert applicant.form_completion == "yes"

    def test_missing_columns_default(self):
        index = HeaderIndex(["Org Name"])
        applicant = Scorer.read_applicant(index, ["Solo Org"])
        assert applicant.org_name == "Solo Org"
        assert applicant.budget == ""
        assert applicant.part_time == 0
