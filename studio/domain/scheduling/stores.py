"""Read interfaces the conflict checker depends on, plus an in-memory store.

The SQL-backed implementation lives in ``repository.py``. Both return the same
record types from ``types.py``.
"""

from typing import Iterable, Optional, Protocol

from .types import Appointment, ArtistRef, AvailabilityBlock


class ArtistDirectory(Protocol):
    def get_artist(self, artist_id: str) -> Optional[ArtistRef]:
        """Return the artist, or None when the id is unknown."""
        ...


class AppointmentStore(Protocol):
    def list_active_appointments(self, artist_id: str) -> list[Appointment]:
        """Appointments of the artist with status tentative or confirmed, soft-deleted rows excluded."""
        ...


class AvailabilityStore(Protocol):
    def list_blocking_availability(self, artist_id: str) -> list[AvailabilityBlock]:
        """Availability entries of the artist with kind == blocked."""
        ...


class InMemoryScheduleStore:
    """Dict-backed store implementing all three read interfaces.

    Used by tests and scripts that need the checker without a database.
    """

    def __init__(
        self,
        artists: Iterable[ArtistRef] = (),
        appointments: Iterable[Appointment] = (),
        blocks: Iterable[AvailabilityBlock] = (),
    ):
        self.artists: dict[str, ArtistRef] = {a.id: a for a in artists}
        self.appointments: dict[str, Appointment] = {a.id: a for a in appointments}
        self.blocks: dict[str, AvailabilityBlock] = {b.id: b for b in blocks}

    def add_artist(self, artist: ArtistRef) -> ArtistRef:
        self.artists[artist.id] = artist
        return artist

    def add_appointment(self, appointment: Appointment) -> Appointment:
        self.appointments[appointment.id] = appointment
        return appointment

    def add_block(self, block: AvailabilityBlock) -> AvailabilityBlock:
        self.blocks[block.id] = block
        return block

    def get_artist(self, artist_id: str) -> Optional[ArtistRef]:
        return self.artists.get(artist_id)

    def list_active_appointments(self, artist_id: str) -> list[Appointment]:
        return [
            a for a in self.appointments.values() if a.artist_id == artist_id and a.is_active
        ]

    def list_blocking_availability(self, artist_id: str) -> list[AvailabilityBlock]:
        return [b for b in self.blocks.values() if b.artist_id == artist_id and b.is_blocking]
