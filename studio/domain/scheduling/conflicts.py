"""
Appointment Conflict Checker

Reports every active appointment and every blocking availability entry of an
artist that overlaps a candidate time range:
- Only tentative/confirmed appointments count
- Only "blocked" availability entries count
- Ranges are half-open, so back-to-back bookings never conflict
"""

import logging
from typing import Iterable, Optional

from .errors import InvalidInput, NotFound
from .stores import AppointmentStore, ArtistDirectory, AvailabilityStore
from .types import Appointment, AvailabilityBlock, ConflictResult, TimeRange

logger = logging.getLogger(__name__)


def overlaps(a: TimeRange, b: TimeRange) -> bool:
    """True when two half-open ranges share at least one instant."""
    return a.start < b.end and b.start < a.end


def _ordered(records):
    return sorted(records, key=lambda r: (r.range.start, r.id))


def find_conflicts(
    artist_id: str,
    candidate: TimeRange,
    appointments: Iterable[Appointment],
    blocks: Iterable[AvailabilityBlock],
    exclude_appointment_id: Optional[str] = None,
) -> ConflictResult:
    """
    Pure overlap evaluation over already-loaded records.

    Records of other artists, non-active appointments and non-blocking
    availability kinds are skipped even if the caller passes them in.
    Every overlap is collected.
    """
    conflicting_appointments = [
        appt
        for appt in appointments
        if appt.artist_id == artist_id
        and appt.is_active
        and appt.id != exclude_appointment_id
        and overlaps(candidate, appt.range)
    ]
    conflicting_blocks = [
        block
        for block in blocks
        if block.artist_id == artist_id and block.is_blocking and overlaps(candidate, block.range)
    ]
    return ConflictResult(
        conflicting_appointments=_ordered(conflicting_appointments),
        conflicting_blocks=_ordered(conflicting_blocks),
    )


class ConflictChecker:
    """Binds ``find_conflicts`` to the stores that supply its records."""

    def __init__(
        self,
        artists: ArtistDirectory,
        appointments: AppointmentStore,
        availability: AvailabilityStore,
    ):
        self.artists = artists
        self.appointments = appointments
        self.availability = availability

    @classmethod
    def from_store(cls, store) -> "ConflictChecker":
        """Build a checker from one object implementing all three read interfaces."""
        return cls(store, store, store)

    def check_conflict(
        self,
        artist_id: str,
        candidate_range: TimeRange,
        exclude_appointment_id: Optional[str] = None,
    ) -> ConflictResult:
        """
        Check a candidate range against the artist's calendar.

        Raises:
            InvalidInput: candidate_range is not a valid TimeRange
            NotFound: artist_id does not resolve to an artist

        Store errors propagate unchanged. An empty result is only ever
        returned when both stores were read successfully.
        """
        if not isinstance(candidate_range, TimeRange):
            raise InvalidInput("Candidate must be a TimeRange")
        if not artist_id:
            raise NotFound("Artist not found")

        try:
            artist = self.artists.get_artist(artist_id)
            if artist is not None:
                appointments = self.appointments.list_active_appointments(artist_id)
                blocks = self.availability.list_blocking_availability(artist_id)
        except Exception as e:
            logger.error(f"❌ Could not load calendar for artist {artist_id}: {e}")
            raise

        if artist is None:
            logger.warning(f"⚠️ Conflict check for unknown artist {artist_id}")
            raise NotFound(f"Artist {artist_id} not found")

        result = find_conflicts(
            artist_id, candidate_range, appointments, blocks, exclude_appointment_id
        )

        logger.info(
            f"📅 Conflict check artist={artist_id} "
            f"[{candidate_range.start.isoformat()}, {candidate_range.end.isoformat()}) "
            f"appointments={len(result.conflicting_appointments)} "
            f"blocks={len(result.conflicting_blocks)}"
        )
        return result

    def check_window(
        self,
        artist_id: str,
        start_at,
        end_at,
        exclude_appointment_id: Optional[str] = None,
    ) -> ConflictResult:
        """Same as ``check_conflict`` but takes raw start/end datetimes."""
        return self.check_conflict(artist_id, TimeRange(start_at, end_at), exclude_appointment_id)
