from datetime import datetime, timezone, tzinfo
from typing import Optional

import pytz


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Look up a timezone by IANA name.

    Args:
        name: Zone name such as "America/Los_Angeles", or None for the host zone

    Returns:
        The zone, or None meaning the host's local zone

    Raises:
        pytz.UnknownTimeZoneError: If the name is unknown
    """
    if not name:
        return None
    return pytz.timezone(name)


def local_to_utc(
    local_dt: datetime, tz: Optional[tzinfo] = None
) -> datetime:
    """Interpret a wall-clock datetime in a timezone and convert it to UTC.

    Args:
        local_dt: Naive local datetime (an aware one is simply converted)
        tz: Zone of the wall clock; the host's local zone when None

    Returns:
        datetime: UTC datetime
    """
    if local_dt.tzinfo is None:
        if tz is None:
            # astimezone() on a naive value assumes host local time
            local_dt = local_dt.astimezone()
        else:
            local_dt = tz.localize(local_dt)
    return ensure_utc(local_dt)


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
