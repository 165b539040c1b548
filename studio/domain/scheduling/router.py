"""Scheduling router - FastAPI endpoints for the scheduling board"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.validators import parse_instant
from .conflicts import ConflictChecker
from .errors import (
    InvalidInput,
    NotFound,
    SchedulingConflict,
    SchedulingError,
    StoreIntegrityError,
)
from .repository import conflict_checker_for
from .schemas import ConflictCheckResponse
from .types import TimeRange

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Scheduling"])

MSG_CHECK_UNAVAILABLE = (
    "Unable to check scheduling conflicts right now. Do not book this slot until the check succeeds."
)

# (error type, status code). First match wins.
SCHEDULING_ERROR_STATUS: list[tuple[type, int]] = [
    (InvalidInput, 400),
    (NotFound, 404),
    (SchedulingConflict, 409),
    (StoreIntegrityError, 503),
]


def scheduling_error_to_http(exc: SchedulingError) -> HTTPException:
    """Map a scheduling domain error to the HTTPException the dashboard expects"""
    for error_type, status_code in SCHEDULING_ERROR_STATUS:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def get_conflict_checker(db: Session = Depends(get_db)) -> ConflictChecker:
    """Dependency injection for ConflictChecker"""
    return conflict_checker_for(db)


@router.get("/conflicts", response_model=ConflictCheckResponse)
def check_appointment_conflicts(
    artistId: Optional[str] = Query(None),
    startAt: Optional[str] = Query(None),
    endAt: Optional[str] = Query(None),
    excludeId: Optional[str] = Query(None, description="Appointment being edited"),
    checker: ConflictChecker = Depends(get_conflict_checker),
):
    """
    Check a proposed time range against an artist's appointments and blocked time.

    A failed check is never reported as "no conflict": store errors return 503
    so the scheduling board blocks the booking instead of proceeding.
    """
    if not artistId or not startAt or not endAt:
        raise HTTPException(status_code=400, detail="Missing required parameters")

    try:
        try:
            window = TimeRange(parse_instant(startAt), parse_instant(endAt))
        except ValueError as e:
            raise InvalidInput(str(e)) from e

        result = checker.check_conflict(artistId, window, exclude_appointment_id=excludeId)
    except (StoreIntegrityError, SQLAlchemyError) as e:
        logger.error(f"❌ Conflict check failed for artist {artistId}: {e}")
        raise HTTPException(status_code=503, detail=MSG_CHECK_UNAVAILABLE) from e
    except SchedulingError as e:
        raise scheduling_error_to_http(e) from e

    return ConflictCheckResponse.from_result(result)
