"""Scheduling domain schemas - Pydantic models for API responses"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .types import Appointment, AvailabilityBlock, ConflictResult


class ConflictingAppointment(BaseModel):
    id: str
    title: Optional[str] = None
    startAt: datetime
    endAt: datetime
    status: str
    customer: Optional[str] = None
    artist: Optional[str] = None
    type: str = "appointment"


class ConflictingBlock(BaseModel):
    id: str
    title: str
    startAt: datetime
    endAt: datetime
    type: str = "availability"


class ConflictCheckResponse(BaseModel):
    """Schema for the conflict check response consumed by the scheduling board"""

    hasConflict: bool
    conflicts: list[ConflictingAppointment]
    availabilityBlocks: list[ConflictingBlock]

    @classmethod
    def from_result(cls, result: ConflictResult) -> "ConflictCheckResponse":
        return cls(
            hasConflict=result.has_conflict,
            conflicts=[_appointment_item(a) for a in result.conflicting_appointments],
            availabilityBlocks=[_block_item(b) for b in result.conflicting_blocks],
        )


def _appointment_item(appointment: Appointment) -> ConflictingAppointment:
    return ConflictingAppointment(
        id=appointment.id,
        title=appointment.title,
        startAt=appointment.range.start,
        endAt=appointment.range.end,
        status=appointment.status,
        customer=appointment.customer,
        artist=appointment.artist,
    )


def _block_item(block: AvailabilityBlock) -> ConflictingBlock:
    return ConflictingBlock(
        id=block.id,
        title=f"Availability Block: {block.kind}",
        startAt=block.range.start,
        endAt=block.range.end,
    )
