"""
Scheduling models for the studio dashboard
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .config import STUDIO_TIMEZONE
from .database import Base


def generate_id():
    """Generate a unique string ID"""
    return str(uuid.uuid4())


class Artist(Base):
    """Artist who can be booked for appointments"""

    __tablename__ = "artists"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    appointments = relationship("Appointment", back_populates="artist")
    availability_blocks = relationship(
        "AvailabilityBlock", back_populates="artist", cascade="all, delete-orphan"
    )


class Appointment(Base):
    """Scheduled or held time with an artist"""

    __tablename__ = "appointments"
    __table_args__ = (
        Index("ix_appointments_artist_start", "artist_id", "start_at"),
        CheckConstraint("start_at < end_at", name="ck_appointments_range"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    artist_id = Column(String(36), ForeignKey("artists.id"), nullable=False)

    title = Column(String(255), nullable=False)
    start_at = Column(DateTime(timezone=True), nullable=False)
    end_at = Column(DateTime(timezone=True), nullable=False)
    timezone = Column(String(64), default=STUDIO_TIMEZONE, nullable=False)

    # Status workflow: tentative → confirmed → completed
    # canceled: soft-deleted (deleted_at set) or canceled by staff
    # Only tentative and confirmed block the artist's calendar
    status = Column(String(20), default="tentative", nullable=False, index=True)

    # Walk-in / guest details when there is no customer record
    guest_name = Column(String(255), nullable=True)
    guest_email = Column(String(255), nullable=True)
    guest_phone = Column(String(32), nullable=True)
    notes_internal = Column(Text, nullable=True)

    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    artist = relationship("Artist", back_populates="appointments")


class AvailabilityBlock(Base):
    """Staff-declared time range for an artist (blocked, vacation, walk_in_only)"""

    __tablename__ = "availability_blocks"
    __table_args__ = (CheckConstraint("start_at < end_at", name="ck_availability_blocks_range"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    artist_id = Column(String(36), ForeignKey("artists.id"), nullable=False, index=True)

    start_at = Column(DateTime(timezone=True), nullable=False)
    end_at = Column(DateTime(timezone=True), nullable=False)
    type = Column(String(20), nullable=False)  # blocked | vacation | walk_in_only
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    artist = relationship("Artist", back_populates="availability_blocks")
