"""Scheduling records shared by the conflict checker and its stores.

These are plain immutable values, independent of the ORM, so the checker can
run against any store that can produce them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ...shared.validators import ensure_utc
from .errors import InvalidInput

APPOINTMENT_STATUSES = ("tentative", "confirmed", "completed", "canceled")
# Only these statuses hold time on an artist's calendar
ACTIVE_STATUSES = frozenset({"tentative", "confirmed"})

BLOCK_KINDS = ("blocked", "vacation", "walk_in_only")
# vacation and walk_in_only are informational and never prevent scheduling
BLOCKING_KIND = "blocked"


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval ``[start, end)`` of UTC instants.

    Naive datetimes are read as UTC. Construction fails with ``InvalidInput``
    unless ``start < end``.

    Example:
        >>> TimeRange(datetime(2026, 3, 1, 10), datetime(2026, 3, 1, 12))
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if not isinstance(self.start, datetime) or not isinstance(self.end, datetime):
            raise InvalidInput("Time range start and end must both be datetimes")

        start = ensure_utc(self.start)
        end = ensure_utc(self.end)
        if start >= end:
            raise InvalidInput(
                f"Time range start must be before end (got {start.isoformat()} → {end.isoformat()})"
            )

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)


@dataclass(frozen=True)
class ArtistRef:
    id: str
    name: str
    slug: Optional[str] = None


@dataclass(frozen=True)
class Appointment:
    """An appointment as seen by the conflict checker."""

    id: str
    artist_id: str
    range: TimeRange
    status: str
    title: Optional[str] = None
    customer: Optional[str] = None
    artist: Optional[str] = None  # display name

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES


@dataclass(frozen=True)
class AvailabilityBlock:
    """An availability entry as seen by the conflict checker."""

    id: str
    artist_id: str
    range: TimeRange
    kind: str
    notes: Optional[str] = None

    @property
    def is_blocking(self) -> bool:
        return self.kind == BLOCKING_KIND


@dataclass(frozen=True)
class ConflictResult:
    conflicting_appointments: list[Appointment] = field(default_factory=list)
    conflicting_blocks: list[AvailabilityBlock] = field(default_factory=list)

    @property
    def has_conflict(self) -> bool:
        return bool(self.conflicting_appointments or self.conflicting_blocks)
