"""Timestamp utilities.

Ledger timestamps are stored as naive UTC datetimes so that snapshot keys
compare equal regardless of the offset the caller supplied.
"""

from datetime import datetime
from typing import Optional, Union

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to naive UTC (storage form)."""
    if dt.tzinfo is None:
        # Assume naive datetime is already UTC
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)


def parse_datetime_utc(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it as naive UTC.

    If no timezone is provided in the string, assumes ``default_tz`` (UTC).
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None and default_tz is not None:
        dt = default_tz.localize(dt)
    return to_utc(dt)


def coerce_timestamp(value: Union[datetime, str, None]) -> datetime:
    """Normalize an optional datetime or ISO string to naive UTC, defaulting to now."""
    if value is None:
        return to_utc(now_utc())
    if isinstance(value, str):
        return parse_datetime_utc(value)
    return to_utc(value)
