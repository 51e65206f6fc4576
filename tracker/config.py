"""Configuration settings for the applicant tracker."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    data_dir: Path = base_dir / "data"
    db_path: Path = data_dir / "tracker.db"

    # Sheet names
    results_sheet: str = "Application Results"
    raw_sheet: str = "Raw Application Data"
    ledger_sheet: str = "Alumni Organizations"
    waitlist_sheet: str = "TNP Waitlist"

    # The ledger keeps a title row above its column headers
    ledger_header_row: int = 2

    # Processed marker labels written into the raw intake sheet
    processed_done_label: str = "Yes"
    processed_in_progress_label: str = "Loading App Data"

    # Status given to freshly transferred results
    pending_status: str = "Pending"

    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.db_path}"

    @property
    def working_sheets(self) -> list[str]:
        """Sheets that are never treated as a survey batch."""
        return [
            self.ledger_sheet,
            self.waitlist_sheet,
            self.results_sheet,
            self.raw_sheet,
        ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "TRACKER_"


settings = Settings()
