"""Datetime utilities for timezone-aware UTC timestamps.

Parcel creation times are stored as text, so this module also owns the
conversion between ``datetime`` values and the stored string form.

Usage:
    from parcel_tracker.utils.datetime_utils import utc_now, format_created_at

    created_at = format_created_at(utc_now())
"""

from datetime import datetime, timezone
from typing import Optional

from .constants import CREATED_AT_FORMAT


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime.

    Returns:
        Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def format_created_at(value: Optional[datetime] = None) -> str:
    """Format a datetime as a parcel creation timestamp.

    Naive datetimes are assumed to already be in UTC. Sub-second precision
    is dropped.

    Args:
        value: Datetime to format. Defaults to the current UTC time.

    Returns:
        Timestamp string such as "2024-03-01T12:30:00Z"
    """
    if value is None:
        value = utc_now()
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(CREATED_AT_FORMAT)


def parse_created_at(value: str) -> datetime:
    """Parse a stored creation timestamp back into an aware UTC datetime.

    Raises:
        ValueError: If the string is not in the stored format
    """
    return datetime.strptime(value, CREATED_AT_FORMAT).replace(tzinfo=timezone.utc)
