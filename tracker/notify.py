"""User notifications sent after each run."""

import logging
from abc import ABC, abstractmethod

from tracker.models import IngestResult, ScoringResult, TransferResult

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Delivers a message to whoever triggered the run."""

    @abstractmethod
    def notify(self, message: str) -> None:
        pass


class ConsoleNotifier(Notifier):
    """Print messages to stdout."""

    def notify(self, message: str) -> None:
        print(message)


class LogNotifier(Notifier):
    """Send messages to the log."""

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def notify(self, message: str) -> None:
        logger.log(self.level, message)


class MemoryNotifier(Notifier):
    """Keep messages for later inspection."""

    def __init__(self):
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> str:
        return self.messages[-1] if self.messages else ""


def ingest_message(result: IngestResult) -> str:
    if result.duplicates > 0:
        return (
            f"Transfer complete! {result.copied} row(s) have been copied.\n"
            f"There were {result.duplicates} rows that already exist in the "
            f"Master Tracker that were not copied over."
        )
    return f"Transfer complete! {result.copied} rows have been copied."


def transfer_message(result: TransferResult) -> str:
    message = f"{result.transferred} application(s) moved to the results sheet."
    if result.skipped_in_progress:
        message += (
            f"\n{result.skipped_in_progress} application(s) are still loading "
            f"and will be picked up on the next run."
        )
    return message


def scoring_message(result: ScoringResult) -> str:
    return f"Scores assigned to {result.scored} organization(s)."
