"""Merge a survey response batch into the Master Tracker ledger."""

import logging
from collections import Counter
from typing import Any

from tracker.extract import HeaderIndex, as_text, parse_cohort, parse_year, split_name_role
from tracker.models import IngestResult
from tracker.models import columns
from tracker.store import Table, is_blank_row

logger = logging.getLogger(__name__)

DuplicateKey = tuple[str, str]


class SurveyIngestor:
    """Append survey responses to the ledger, skipping known organizations.

    A response is a duplicate when its (organization, cohort) pair already
    exists in the ledger as it stood before the run. Keys copied during the
    run are not added to the lookup, so a batch is expected to hold at most
    one response per organization. Responses that would leave an empty
    ledger row are skipped and counted neither as copied nor as duplicates.
    """

    def ingest(self, batch_label: str, source: Table, ledger: Table) -> IngestResult:
        """Copy every new response from ``source`` into ``ledger``."""
        cohort = parse_cohort(batch_label)
        cohort_year = parse_year(cohort)
        if not cohort:
            logger.warning(f"No season and year in '{batch_label}', ingesting with an empty cohort")

        source_index = HeaderIndex.for_table(source)
        ledger_index = HeaderIndex.for_table(ledger)
        source_index.require(columns.SURVEY_ORG_NAME)
        ledger_index.require(columns.LEDGER_ORG_NAME, columns.LEDGER_COHORT)

        existing = self.existing_keys(ledger, ledger_index)
        responses = [r for r in source.get_rows() if not is_blank_row(r)]
        self._warn_on_repeats(responses, source_index, cohort)

        result = IngestResult(batch=batch_label, cohort=cohort, cohort_year=cohort_year)

        for response in responses:
            org_name = as_text(source_index.value(response, columns.SURVEY_ORG_NAME, ""))
            if (org_name, cohort) in existing:
                logger.debug(f"Skipping '{org_name}', already in {cohort or 'the ledger'}")
                result.duplicates += 1
                continue

            row = ledger_index.build_row(
                self.ledger_values(response, source_index, cohort, cohort_year)
            )
            if is_blank_row(row):
                logger.debug("Skipping a response with nothing to copy")
                continue
            row_number = ledger.append_row(row)
            result.copied += 1
            logger.debug(f"Copied '{org_name}' to ledger row {row_number}")

        logger.info(
            f"Ingested '{batch_label}': {result.copied} copied, "
            f"{result.duplicates} already in the ledger"
        )
        return result

    @staticmethod
    def existing_keys(ledger: Table, index: HeaderIndex) -> set[DuplicateKey]:
        """(organization, cohort) pairs of every ledger data row."""
        return {
            (
                as_text(index.value(row, columns.LEDGER_ORG_NAME, "")),
                as_text(index.value(row, columns.LEDGER_COHORT, "")),
            )
            for row in ledger.get_rows()
        }

    @staticmethod
    def ledger_values(
        response: list[Any],
        index: HeaderIndex,
        cohort: str,
        cohort_year: str,
    ) -> dict[str, Any]:
        """Ledger column -> value for one survey response."""
        name, role = split_name_role(index.text(response, columns.SURVEY_NAME_ROLE))
        values: dict[str, Any] = {
            question_column: index.value(response, question, "")
            for question, question_column in columns.SURVEY_TO_LEDGER.items()
        }
        values.update({
            columns.LEDGER_COHORT: cohort,
            columns.LEDGER_DATE: cohort_year,
            columns.LEDGER_NAME: name,
            columns.LEDGER_ROLE: role,
        })
        return values

    @staticmethod
    def _warn_on_repeats(responses: list[list[Any]], index: HeaderIndex, cohort: str):
        counts = Counter(
            as_text(index.value(r, columns.SURVEY_ORG_NAME, "")) for r in responses
        )
        repeated = sorted(org for org, count in counts.items() if count > 1)
        if repeated:
            logger.warning(
                f"Batch for {cohort or 'an unnamed cohort'} has more than one response from: "
                f"{', '.join(repeated)}. Each will be copied."
            )
