"""Tests for scoring write-back and the user-facing commands."""

import pytest

from tracker.commands import (
    find_survey_sheet,
    init_workbook,
    run_ingest,
    run_scoring,
    run_transfer,
)
from tracker.config import settings
from tracker.errors import LedgerLayoutError, MissingColumnError, MissingSelectionError, SheetNotFoundError
from tracker.models import columns
from tracker.notify import MemoryNotifier, ingest_message
from tracker.models import IngestResult
from tracker.score import score_selection
from tracker.store import MemoryTable, MemoryWorkbook


def make_result_row(**values) -> list:
    """Create a results row from column -> value pairs."""
    row = [""] * len(columns.RESULTS_HEADERS)
    for header, value in values.items():
        row[columns.RESULTS_HEADERS.index(header)] = value
    return row


def make_results(*rows: list) -> MemoryTable:
    return MemoryTable(settings.results_sheet, [columns.RESULTS_HEADERS, *rows])


def strong_applicant() -> list:
    return make_result_row(**{
        columns.ORG_NAME: "Harbour Food Bank",
        columns.PARTNER: "Yes",
        columns.BUDGET: "$500,001 - 1,000,000",
        columns.FULL_TIME: "25",
        columns.PART_TIME: "12",
        columns.VOLUNTEERS: "8",
        columns.PARTICIPANT_ROLES[0]: "Executive Director",
        columns.PARTICIPANT_ROLES[2]: "Board Member",
        columns.TIME_COMMITMENT: "yes",
        columns.APP_FORM: "yes",
    })


def make_workbook() -> MemoryWorkbook:
    workbook = MemoryWorkbook()
    init_workbook(workbook)
    return workbook


def cell(table, row: int, header: str):
    return table.get_cell(row, table.get_header_row().index(header) + 1)


class TestScoreSelection:
    """Tests for writing scores into the results sheet."""

    def test_writes_sub_scores_and_live_total(self):
        results = make_results(strong_applicant())
        result = score_selection(results, 2, 1)

        assert result.scored == 1
        # 5 + 5 + 5 + 4 + 3 + 5 + 5 + 5
        assert result.totals == {2: 37}
        assert cell(results, 2, columns.SCORE) == "=SUM(V2:AC2)"
        assert cell(results, 2, columns.BUDGET_SCORE) == 5
        assert cell(results, 2, columns.TEAM_SCORE) == 5
        assert results.get_value(2, 1) == 37

    def test_total_reflects_manual_edit(self):
        results = make_results(strong_applicant())
        score_selection(results, 2, 1)
        results.set_cell(2, results.get_header_row().index(columns.TEAM_SCORE) + 1, 0)
        assert results.get_value(2, 1) == 32

    def test_scores_only_selected_rows(self):
        results = make_results(strong_applicant(), strong_applicant(), strong_applicant())
        result = score_selection(results, 3, 1)

        assert result.scored == 1
        assert cell(results, 2, columns.SCORE) == ""
        assert cell(results, 3, columns.SCORE) == "=SUM(V3:AC3)"
        assert cell(results, 4, columns.SCORE) == ""

    def test_selection_clipped_to_data_rows(self):
        results = make_results(strong_applicant(), make_result_row(**{columns.ORG_NAME: "Quiet Org"}))
        result = score_selection(results, 1, 10)

        assert result.scored == 2
        assert sorted(result.totals) == [2, 3]
        assert results.get_header_row()[0] == columns.SCORE

    def test_rescoring_is_idempotent(self):
        results = make_results(strong_applicant())
        score_selection(results, 2, 1)
        first = results.get_rows()
        score_selection(results, 2, 1)
        assert results.get_rows() == first

    @pytest.mark.parametrize("start,count", [(None, 1), (2, None), (2, 0)])
    def test_missing_selection(self, start, count):
        with pytest.raises(MissingSelectionError):
            score_selection(make_results(strong_applicant()), start, count)

    def test_selection_below_data(self):
        with pytest.raises(MissingSelectionError):
            score_selection(make_results(strong_applicant()), 10, 2)

    def test_missing_score_column_aborts_before_writes(self):
        headers = [h for h in columns.RESULTS_HEADERS if h != columns.VOLUNTEER_SCORE]
        results = MemoryTable("Application Results", [headers, ["", "", "Org"]])
        with pytest.raises(MissingColumnError):
            score_selection(results, 2, 1)
        assert results.get_row(2) == ["", "", "Org"]

    def test_score_columns_must_be_adjacent(self):
        headers = list(columns.RESULTS_HEADERS)
        headers.remove(columns.PARTNER_SCORE)
        headers.insert(0, columns.PARTNER_SCORE)
        results = MemoryTable("Application Results", [headers, ["x"]])
        with pytest.raises(LedgerLayoutError):
            score_selection(results, 2, 1)


class TestRunCommands:
    """Tests for command wiring and notifications."""

    def test_init_creates_working_sheets(self):
        workbook = MemoryWorkbook()
        created = init_workbook(workbook)
        assert created == [settings.ledger_sheet, settings.results_sheet, settings.raw_sheet]
        assert workbook.table(settings.ledger_sheet).header_row == settings.ledger_header_row
        assert init_workbook(workbook) == []

    def test_run_scoring_notifies(self):
        workbook = make_workbook()
        workbook.table(settings.results_sheet).append_row(strong_applicant())
        notifier = MemoryNotifier()
        result = run_scoring(workbook, 2, 1, notifier=notifier)

        assert result.scored == 1
        assert notifier.messages == ["Scores assigned to 1 organization(s)."]

    def test_run_scoring_reports_missing_selection(self):
        notifier = MemoryNotifier()
        with pytest.raises(MissingSelectionError):
            run_scoring(make_workbook(), None, None, notifier=notifier)
        assert notifier.last == "Please select a range of rows to process."

    def test_transfer_then_score(self):
        workbook = make_workbook()
        raw = workbook.table(settings.raw_sheet)
        raw_row = [""] * len(columns.RAW_HEADERS)
        raw_row[columns.RAW_HEADERS.index(columns.RAW_ORG_NAME)] = "Harbour Food Bank"
        raw_row[columns.RAW_HEADERS.index(columns.RAW_FULL_TIME)] = "30"
        raw.append_row(raw_row)

        notifier = MemoryNotifier()
        transferred = run_transfer(workbook, notifier=notifier)
        assert transferred.transferred == 1
        assert notifier.last == "1 application(s) moved to the results sheet."

        scored = run_scoring(workbook, 2, 1, notifier=notifier)
        # partner 1, budget 0, full-time 5, part-time 2, volunteers 2, team 0, time 1, form 0
        assert scored.totals == {2: 11}
        assert workbook.table(settings.results_sheet).get_value(2, 1) == 11

    def test_transfer_reports_loading_rows(self):
        workbook = make_workbook()
        raw_row = [""] * len(columns.RAW_HEADERS)
        raw_row[0] = settings.processed_in_progress_label
        workbook.table(settings.raw_sheet).append_row(raw_row)

        notifier = MemoryNotifier()
        run_transfer(workbook, notifier=notifier)
        assert "still loading" in notifier.last

    def test_run_transfer_missing_sheet(self):
        notifier = MemoryNotifier()
        with pytest.raises(SheetNotFoundError):
            run_transfer(MemoryWorkbook(), notifier=notifier)
        assert settings.raw_sheet in notifier.last

    def test_find_survey_sheet(self):
        workbook = make_workbook()
        workbook.create_table(settings.waitlist_sheet, ["Org Name"])
        workbook.create_table("Victoria Spring 2021 Applications", [columns.SURVEY_ORG_NAME])
        assert find_survey_sheet(workbook) == "Victoria Spring 2021 Applications"

    def test_find_survey_sheet_none(self):
        with pytest.raises(SheetNotFoundError) as exc:
            find_survey_sheet(make_workbook())
        assert str(exc.value) == "No survey response sheet found."

    def test_run_ingest_without_survey_sheet_notifies(self):
        notifier = MemoryNotifier()
        with pytest.raises(SheetNotFoundError):
            run_ingest(make_workbook(), notifier=notifier)
        assert notifier.last == "No survey response sheet found."

    def test_run_ingest_default_sheet(self):
        workbook = make_workbook()
        survey = workbook.create_table("Fall 2022 TNP", [columns.SURVEY_ORG_NAME, columns.SURVEY_NAME_ROLE])
        survey.append_row(["Harbour Food Bank", "Jane Doe, Board Member"])
        survey.append_row(["Island Arts", "Sam Lee"])

        notifier = MemoryNotifier()
        result = run_ingest(workbook, notifier=notifier)

        assert result.batch == "Fall 2022 TNP"
        assert result.cohort == "Fall 2022"
        assert result.copied == 2
        assert notifier.last == "Transfer complete! 2 rows have been copied."
        assert workbook.has_table("Fall 2022 TNP")

    def test_run_ingest_reports_duplicates_and_deletes(self):
        workbook = make_workbook()
        survey = workbook.create_table("Fall 2022 TNP", [columns.SURVEY_ORG_NAME])
        survey.append_row(["Harbour Food Bank"])
        run_ingest(workbook, sheet="Fall 2022 TNP", notifier=MemoryNotifier())

        notifier = MemoryNotifier()
        result = run_ingest(workbook, sheet="Fall 2022 TNP", delete_source=True, notifier=notifier)
        assert result.copied == 0
        assert result.duplicates == 1
        assert "1 rows that already exist" in notifier.last
        assert not workbook.has_table("Fall 2022 TNP")

    def test_run_ingest_missing_sheet(self):
        notifier = MemoryNotifier()
        with pytest.raises(SheetNotFoundError):
            run_ingest(make_workbook(), sheet="Nope", notifier=notifier)
        assert notifier.last == "Sheet 'Nope' not found."


class TestMessages:
    """Tests for notification text."""

    def test_ingest_message_without_duplicates(self):
        message = ingest_message(IngestResult(batch="b", copied=3))
        assert message == "Transfer complete! 3 rows have been copied."

    def test_ingest_message_with_duplicates(self):
        message = ingest_message(IngestResult(batch="b", copied=1, duplicates=2))
        assert message == (
            "Transfer complete! 1 row(s) have been copied.\n"
            "There were 2 rows that already exist in the Master Tracker that were not copied over."
        )
