"""Survey ingestion and raw intake transfer."""

from .survey import SurveyIngestor
from .transfer import transfer_unprocessed

__all__ = ["SurveyIngestor", "transfer_unprocessed"]
