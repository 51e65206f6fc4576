"""API routes for the applicant tracker."""

import logging
from typing import Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from tracker.commands import run_ingest, run_scoring, run_transfer
from tracker.errors import SheetNotFoundError, TrackerError
from tracker.models.database import get_session
from tracker.notify import MemoryNotifier
from tracker.store import SqlWorkbook, Workbook

logger = logging.getLogger(__name__)

router = APIRouter()


def get_workbook() -> Iterator[Workbook]:
    """Open the configured workbook for one request."""
    workbook = SqlWorkbook(get_session())
    try:
        yield workbook
    finally:
        workbook.close()


class ScoreRequest(BaseModel):
    """Row range to score, in sheet row numbers."""
    start_row: Optional[int] = Field(default=None, ge=1)
    num_rows: Optional[int] = Field(default=None, ge=0)


class ScoreResponse(BaseModel):
    scored: int
    totals: dict[int, int]
    message: str


class IngestRequest(BaseModel):
    sheet: Optional[str] = None
    delete_source: bool = False


class IngestResponse(BaseModel):
    batch: str
    cohort: str
    copied: int
    duplicates: int
    message: str


class TransferResponse(BaseModel):
    transferred: int
    skipped_done: int
    skipped_in_progress: int
    message: str


class SheetItem(BaseModel):
    name: str
    rows: int


def _raise_for(error: TrackerError):
    status = 404 if isinstance(error, SheetNotFoundError) else 400
    raise HTTPException(status_code=status, detail=str(error))


@router.get("/sheets", response_model=list[SheetItem])
async def list_sheets(workbook: Workbook = Depends(get_workbook)):
    """List sheets in workbook order."""
    items = []
    for name in workbook.table_names():
        table = workbook.table(name)
        items.append(SheetItem(name=name, rows=len(table.data_row_numbers())))
    return items


@router.post("/score", response_model=ScoreResponse)
async def score_rows(request: ScoreRequest, workbook: Workbook = Depends(get_workbook)):
    """Assign rubric scores to a range of results rows."""
    notifier = MemoryNotifier()
    try:
        result = run_scoring(workbook, request.start_row, request.num_rows, notifier=notifier)
    except TrackerError as e:
        _raise_for(e)
    return ScoreResponse(scored=result.scored, totals=result.totals, message=notifier.last)


@router.post("/ingest", response_model=IngestResponse)
async def ingest_survey(request: IngestRequest, workbook: Workbook = Depends(get_workbook)):
    """Copy a survey sheet into the Master Tracker ledger."""
    notifier = MemoryNotifier()
    try:
        result = run_ingest(
            workbook,
            sheet=request.sheet,
            delete_source=request.delete_source,
            notifier=notifier,
        )
    except TrackerError as e:
        _raise_for(e)
    return IngestResponse(
        batch=result.batch,
        cohort=result.cohort,
        copied=result.copied,
        duplicates=result.duplicates,
        message=notifier.last,
    )


@router.post("/transfer", response_model=TransferResponse)
async def transfer_applications(workbook: Workbook = Depends(get_workbook)):
    """Move unprocessed raw applications to the results sheet."""
    notifier = MemoryNotifier()
    try:
        result = run_transfer(workbook, notifier=notifier)
    except TrackerError as e:
        _raise_for(e)
    return TransferResponse(
        transferred=result.transferred,
        skipped_done=result.skipped_done,
        skipped_in_progress=result.skipped_in_progress,
        message=notifier.last,
    )
