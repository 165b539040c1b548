"""Shared helpers for the scheduling tests."""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from studio import models
from studio.database import Base
from studio.domain.scheduling.types import Appointment, AvailabilityBlock, TimeRange


def at(hour, minute=0, day=14):
    """UTC instant on a fixed test day (2026-03-14)."""
    return datetime(2026, 3, day, hour, minute, tzinfo=timezone.utc)


def window(start_hour, end_hour, day=14):
    return TimeRange(at(start_hour, day=day), at(end_hour, day=day))


def appointment(appt_id, start_hour, end_hour, status="confirmed", artist_id="artist-a"):
    return Appointment(
        id=appt_id,
        artist_id=artist_id,
        range=window(start_hour, end_hour),
        status=status,
        title=f"Session {appt_id}",
    )


def block(block_id, start_hour, end_hour, kind="blocked", artist_id="artist-a"):
    return AvailabilityBlock(
        id=block_id, artist_id=artist_id, range=window(start_hour, end_hour), kind=kind
    )


def make_session_factory():
    """In-memory SQLite database with the full schema, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_artist(db, artist_id="artist-a", name="Russ", slug="russ"):
    artist = models.Artist(id=artist_id, name=name, slug=slug, email=f"{slug}@example.com")
    db.add(artist)
    db.commit()
    return artist


def add_appointment_row(
    db, appt_id, start_hour, end_hour, status="confirmed", artist_id="artist-a", guest_name=None
):
    row = models.Appointment(
        id=appt_id,
        artist_id=artist_id,
        title=f"Session {appt_id}",
        start_at=at(start_hour),
        end_at=at(end_hour),
        status=status,
        guest_name=guest_name,
    )
    db.add(row)
    db.commit()
    return row


def add_block_row(db, block_id, start_hour, end_hour, kind="blocked", artist_id="artist-a"):
    row = models.AvailabilityBlock(
        id=block_id,
        artist_id=artist_id,
        start_at=at(start_hour),
        end_at=at(end_hour),
        type=kind,
    )
    db.add(row)
    db.commit()
    return row
