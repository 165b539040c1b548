"""Shared validation utilities"""

from datetime import datetime, timezone
from typing import Optional


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to an aware UTC instant.

    Naive datetimes are taken to already be in UTC (that is how the database
    hands them back on backends without timezone support).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: Optional[str]) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware UTC datetime.

    Args:
        value: Timestamp string, e.g. "2026-03-01T10:00:00Z"

    Returns:
        Aware datetime in UTC

    Raises:
        ValueError: If the value is empty or not ISO 8601
    """
    if not value or not value.strip():
        raise ValueError("Timestamp is required")

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"Invalid timestamp format: {value!r}. Expected ISO 8601") from None

    return ensure_utc(parsed)
