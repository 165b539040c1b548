"""Scheduling repository - Database operations for appointments and availability"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Appointment as AppointmentRow
from ...models import Artist
from ...models import AvailabilityBlock as AvailabilityBlockRow
from .conflicts import ConflictChecker
from .errors import InvalidInput, NotFound, SchedulingConflict, StoreIntegrityError
from .types import (
    ACTIVE_STATUSES,
    BLOCK_KINDS,
    BLOCKING_KIND,
    Appointment,
    ArtistRef,
    AvailabilityBlock,
    TimeRange,
)

logger = logging.getLogger(__name__)


def _stored_range(kind: str, row) -> TimeRange:
    """Stored rows are trusted data: a bad range is a store fault, not caller input"""
    try:
        return TimeRange(row.start_at, row.end_at)
    except InvalidInput as e:
        logger.error(f"❌ Corrupt {kind} {row.id} in store: {e}")
        raise StoreIntegrityError(f"Stored {kind} {row.id} has an invalid time range") from e


def to_appointment(row: AppointmentRow) -> Appointment:
    return Appointment(
        id=row.id,
        artist_id=row.artist_id,
        range=_stored_range("appointment", row),
        status=row.status,
        title=row.title,
        customer=row.guest_name,
        artist=row.artist.name if row.artist else None,
    )


def to_block(row: AvailabilityBlockRow) -> AvailabilityBlock:
    return AvailabilityBlock(
        id=row.id,
        artist_id=row.artist_id,
        range=_stored_range("availability block", row),
        kind=row.type,
        notes=row.notes,
    )


class ScheduleRepository:
    """SQL implementation of the checker's read interfaces over one session"""

    def __init__(self, db: Session):
        self.db = db

    def get_artist(self, artist_id: str) -> Optional[ArtistRef]:
        artist = self.db.query(Artist).filter(Artist.id == artist_id).first()
        if not artist:
            return None
        return ArtistRef(id=artist.id, name=artist.name, slug=artist.slug)

    def list_active_appointments(self, artist_id: str) -> list[Appointment]:
        rows = (
            self.db.query(AppointmentRow)
            .filter(
                AppointmentRow.artist_id == artist_id,
                AppointmentRow.deleted_at.is_(None),
                AppointmentRow.status.in_(sorted(ACTIVE_STATUSES)),
            )
            .order_by(AppointmentRow.start_at)
            .all()
        )
        return [to_appointment(row) for row in rows]

    def list_blocking_availability(self, artist_id: str) -> list[AvailabilityBlock]:
        rows = (
            self.db.query(AvailabilityBlockRow)
            .filter(
                AvailabilityBlockRow.artist_id == artist_id,
                AvailabilityBlockRow.type == BLOCKING_KIND,
            )
            .order_by(AvailabilityBlockRow.start_at)
            .all()
        )
        return [to_block(row) for row in rows]


def conflict_checker_for(db: Session) -> ConflictChecker:
    return ConflictChecker.from_store(ScheduleRepository(db))


def _lock_artist(db: Session, artist_id: str) -> Artist:
    """
    Lock the artist row for the rest of the transaction.

    Every appointment write for an artist goes through this lock, so two
    staff members booking the same artist are serialized and the second one
    sees the first one's appointment when it re-checks conflicts.
    """
    artist = db.query(Artist).filter(Artist.id == artist_id).with_for_update().first()
    if not artist:
        db.rollback()
        raise NotFound(f"Artist {artist_id} not found")
    return artist


def _guard(db: Session, artist_id: str, window: TimeRange, exclude_id: Optional[str] = None):
    try:
        result = conflict_checker_for(db).check_conflict(artist_id, window, exclude_id)
    except Exception:
        # Release the artist lock before the error leaves the write
        db.rollback()
        raise

    if result.has_conflict:
        db.rollback()
        logger.warning(
            f"⚠️ Refusing to book artist {artist_id}: "
            f"{len(result.conflicting_appointments)} appointment(s), "
            f"{len(result.conflicting_blocks)} block(s) in the way"
        )
        raise SchedulingConflict(result)


class AppointmentRepository:
    """Repository for appointment writes. All writes re-check conflicts under the artist lock."""

    @staticmethod
    def get_appointment(db: Session, appointment_id: str) -> Optional[AppointmentRow]:
        return (
            db.query(AppointmentRow)
            .filter(AppointmentRow.id == appointment_id, AppointmentRow.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def create_appointment(
        db: Session,
        artist_id: str,
        start_at: datetime,
        end_at: datetime,
        title: str,
        guest_name: Optional[str] = None,
        guest_email: Optional[str] = None,
        guest_phone: Optional[str] = None,
        notes_internal: Optional[str] = None,
        timezone_name: Optional[str] = None,
    ) -> AppointmentRow:
        """Create a tentative appointment, refusing double bookings"""
        if not title:
            raise InvalidInput("Appointment title is required")
        window = TimeRange(start_at, end_at)

        _lock_artist(db, artist_id)
        _guard(db, artist_id, window)

        appointment = AppointmentRow(
            artist_id=artist_id,
            title=title,
            start_at=window.start,
            end_at=window.end,
            status="tentative",
            guest_name=guest_name,
            guest_email=guest_email,
            guest_phone=guest_phone,
            notes_internal=notes_internal,
        )
        if timezone_name:
            appointment.timezone = timezone_name

        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        logger.info(f"✅ Created appointment {appointment.id} for artist {artist_id}")
        return appointment

    @staticmethod
    def reschedule_appointment(
        db: Session,
        appointment_id: str,
        start_at: datetime,
        end_at: datetime,
        artist_id: Optional[str] = None,
    ) -> AppointmentRow:
        """Move an appointment (optionally to another artist), checked against everything but itself"""
        window = TimeRange(start_at, end_at)

        appointment = AppointmentRepository.get_appointment(db, appointment_id)
        if not appointment:
            raise NotFound(f"Appointment {appointment_id} not found")

        target_artist_id = artist_id or appointment.artist_id
        _lock_artist(db, target_artist_id)
        _guard(db, target_artist_id, window, exclude_id=appointment.id)

        appointment.artist_id = target_artist_id
        appointment.start_at = window.start
        appointment.end_at = window.end
        db.commit()
        db.refresh(appointment)
        logger.info(f"✅ Rescheduled appointment {appointment.id}")
        return appointment

    @staticmethod
    def cancel_appointment(db: Session, appointment_id: str) -> AppointmentRow:
        """Soft delete: the row stays for history but no longer blocks the calendar"""
        appointment = AppointmentRepository.get_appointment(db, appointment_id)
        if not appointment:
            raise NotFound(f"Appointment {appointment_id} not found")

        appointment.deleted_at = datetime.now(timezone.utc)
        appointment.status = "canceled"
        db.commit()
        db.refresh(appointment)
        logger.info(f"🗑️ Canceled appointment {appointment.id}")
        return appointment

    @staticmethod
    def complete_appointment(db: Session, appointment_id: str) -> AppointmentRow:
        appointment = AppointmentRepository.get_appointment(db, appointment_id)
        if not appointment:
            raise NotFound(f"Appointment {appointment_id} not found")

        appointment.status = "completed"
        db.commit()
        db.refresh(appointment)
        return appointment


class AvailabilityRepository:
    """Repository for availability block maintenance"""

    @staticmethod
    def create_block(
        db: Session,
        artist_id: str,
        start_at: datetime,
        end_at: datetime,
        kind: str,
        notes: Optional[str] = None,
    ) -> AvailabilityBlockRow:
        if kind not in BLOCK_KINDS:
            raise InvalidInput(f"Unknown availability type: {kind}")
        window = TimeRange(start_at, end_at)

        if not db.query(Artist).filter(Artist.id == artist_id).first():
            raise NotFound(f"Artist {artist_id} not found")

        block = AvailabilityBlockRow(
            artist_id=artist_id,
            start_at=window.start,
            end_at=window.end,
            type=kind,
            notes=notes,
        )
        db.add(block)
        db.commit()
        db.refresh(block)
        return block

    @staticmethod
    def delete_block(db: Session, block_id: str) -> None:
        block = db.query(AvailabilityBlockRow).filter(AvailabilityBlockRow.id == block_id).first()
        if not block:
            raise NotFound(f"Availability block {block_id} not found")
        db.delete(block)
        db.commit()
