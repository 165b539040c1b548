"""
Scheduling Domain

Appointment conflict checking for the studio scheduling board.

- types.py       TimeRange, Appointment, AvailabilityBlock, ConflictResult
- stores.py      Read interfaces the checker depends on + in-memory store
- conflicts.py   Overlap rule and ConflictChecker
- repository.py  SQL stores and guarded appointment/availability writes
- router.py      GET /appointments/conflicts
"""

from .conflicts import ConflictChecker, find_conflicts, overlaps
from .errors import (
    InvalidInput,
    NotFound,
    SchedulingConflict,
    SchedulingError,
    StoreIntegrityError,
)
from .types import Appointment, ArtistRef, AvailabilityBlock, ConflictResult, TimeRange

__all__ = [
    "ConflictChecker",
    "find_conflicts",
    "overlaps",
    "SchedulingError",
    "InvalidInput",
    "NotFound",
    "SchedulingConflict",
    "StoreIntegrityError",
    "TimeRange",
    "ArtistRef",
    "Appointment",
    "AvailabilityBlock",
    "ConflictResult",
]
