"""SQLAlchemy database models and setup."""

import json
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    Index,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from tracker.config import settings

Base = declarative_base()


class DBSheet(Base):
    """A named sheet in the workbook."""

    __tablename__ = "sheets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    header_row = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=datetime.utcnow)

    rows = relationship(
        "DBSheetRow",
        back_populates="sheet",
        cascade="all, delete-orphan",
        order_by="DBSheetRow.row_number",
    )


class DBSheetRow(Base):
    """One row of cells, stored as a JSON array."""

    __tablename__ = "sheet_rows"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sheet_id = Column(Integer, ForeignKey("sheets.id"), nullable=False)
    row_number = Column(Integer, nullable=False)
    cells = Column(Text, nullable=False, default="[]")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    sheet = relationship("DBSheet", back_populates="rows")

    __table_args__ = (
        UniqueConstraint("sheet_id", "row_number", name="uq_sheet_row"),
        Index("idx_row_sheet", "sheet_id"),
    )

    def get_cells(self) -> list:
        return json.loads(self.cells) if self.cells else []

    def set_cells(self, cells: list):
        self.cells = json.dumps(cells)


# Database initialization
def init_db(db_url: Optional[str] = None) -> sessionmaker:
    """Initialize database and return session maker."""
    url = db_url or settings.database_url
    if db_url is None:
        settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    # API requests may open and close a session on different threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)


def get_session(db_url: Optional[str] = None) -> Session:
    """Get a new database session."""
    SessionLocal = init_db(db_url)
    return SessionLocal()
