"""Civil moments and their Julian Day numbers.

The conversions follow the algorithms in chapter 7 of Meeus, "Astronomical
Algorithms" (2nd ed.). Dates up to 1582-10-04 are taken on the Julian
calendar and dates from 1582-10-15 on the Gregorian one, so the functions
work for any proleptic year, including negative (astronomical) years.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from functools import total_ordering
from typing import Any

from ..constants import (
    DAYS_PER_JULIAN_CENTURY,
    GREGORIAN_REFORM_JDN,
    J2000_JULIAN_DAY,
    SECONDS_PER_DAY,
)
from ..logging import get_logger
from .errors import InvalidArgumentError
from .pythonic_datetimes import ensure_utc, get_utc_datetime
from .rounding import split_fractional_days

logger = get_logger(__name__)

REFORM_YEAR = 1582
REFORM_MONTH = 10


@total_ordering
@dataclass(frozen=True, eq=False)
class Moment:
    """A point in civil (UTC) time down to the millisecond.

    Fields are stored as given; no bounds checking is done on them, so an
    out-of-range month or day is carried through the Julian Day arithmetic
    unchanged.

    Two moments compare equal when their Julian Days are equal, not when
    their fields are. A Julian-calendar date and the Gregorian date naming
    the same day are therefore the same moment.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_fractional_day(cls, year: int, month: int, day: float) -> "Moment":
        """Create a moment from a day of the month carrying the time of day.

        For example, 4.81 is the 4th day at 19:26:24.

        Args:
            year: Year (astronomical numbering, 0 is 1 BCE)
            month: Month (1-12)
            day: Day of month with a fractional time of day

        Raises:
            InvalidArgumentError: If day is NaN or infinite
        """
        if not math.isfinite(day):
            raise InvalidArgumentError("day must be a valid value.", "day")

        whole_day, hour, minute, second, millisecond = split_fractional_days(day)
        return cls(year, month, whole_day, hour, minute, second, millisecond)

    @classmethod
    def from_julian_day(cls, julian_day: float) -> "Moment":
        """Create a moment from a Julian Day.

        Args:
            julian_day: Julian Day (days since 4713 BCE Jan 1 12:00 UTC)

        Raises:
            InvalidArgumentError: If julian_day is NaN or infinite
        """
        if not math.isfinite(julian_day):
            raise InvalidArgumentError("julianDay must be a valid value.", "julian_day")

        jd = julian_day + 0.5
        z = math.trunc(jd)
        f = jd - z

        if z < GREGORIAN_REFORM_JDN:
            a = z
        else:
            alpha = math.trunc((z - 1867216.25) / 36524.25)
            a = z + 1 + alpha - math.trunc(alpha / 4)

        b = a + 1524
        c = math.trunc((b - 122.1) / 365.25)
        d = math.trunc(365.25 * c)
        e = math.trunc((b - d) / 30.6001)

        day = b - d - math.trunc(30.6001 * e) + f
        month = e - 13 if e in (14, 15) else e - 1
        # January and February belong to the year after the one counted by c.
        # A single c - 4715 for every month puts March to December a year late.
        year = c - 4715 if month in (1, 2) else c - 4716

        logger.debug(f"JD {julian_day} -> {year}-{month} day {day}")
        return cls.from_fractional_day(year, month, day)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Moment":
        """Create a moment from a timezone-aware datetime.

        Raises:
            NaiveDateTimeError: If the datetime has no timezone info
        """
        dt = ensure_utc(dt)
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond // 1000,
        )

    @property
    def day_of_month(self) -> float:
        return (
            self.day
            + (self.hour / 24.0)
            + (self.minute / 1440.0)
            + (self.second + self.millisecond / 1000.0) / SECONDS_PER_DAY
        )

    @property
    def julian_day(self) -> float:
        """Continuous count of days since 4713 BCE Jan 1 at noon UTC."""
        year = self.year
        month = self.month
        b = 0.0  # Julian calendar

        # January and February count as months 13 and 14 of the preceding year
        if month in (1, 2):
            year -= 1
            month += 12

        if not self.is_julian_date():
            a = math.floor(year / 100.0)
            b = 2 - a + math.floor(a / 4)

        return (
            math.floor(365.25 * (year + 4716))
            + math.floor(30.6001 * (month + 1))
            + self.day_of_month
            + b
            - 1524.5
        )

    @property
    def jd(self) -> float:
        return self.julian_day

    @property
    def jde(self) -> float:
        # No delta-T correction is applied
        return self.julian_day

    @property
    def time_t(self) -> float:
        """Julian centuries of 36525 days from the epoch J2000.0."""
        return (self.julian_day - J2000_JULIAN_DAY) / DAYS_PER_JULIAN_CENTURY

    @property
    def day_d(self) -> float:
        """Days (and fractions thereof) from the epoch J2000.0."""
        return self.julian_day - J2000_JULIAN_DAY

    def is_julian_date(self) -> bool:
        """Whether the date falls on the Julian calendar.

        The Gregorian calendar replaced it in October 1582, skipping ten days:
        dates up to 4 Oct 1582 are Julian and dates from 15 Oct 1582 are
        Gregorian. Days inside the gap count as Julian.
        """
        if self.year != REFORM_YEAR:
            return self.year < REFORM_YEAR
        if self.month != REFORM_MONTH:
            return self.month < REFORM_MONTH
        return self.day <= 14

    def is_gregorian_date(self) -> bool:
        """Whether the date falls on the Gregorian calendar.

        Unlike is_julian_date(), days 6 to 14 of October 1582 count as
        Gregorian too, so both checks hold for them.
        """
        if self.year != REFORM_YEAR:
            return self.year > REFORM_YEAR
        if self.month != REFORM_MONTH:
            return self.month > REFORM_MONTH
        return self.day > 5

    def to_datetime(self) -> datetime:
        """Return the moment as a UTC datetime.

        Raises:
            ValueError: If the fields do not form a valid datetime (years 1-9999)
        """
        return get_utc_datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Moment):
            return self.julian_day == other.julian_day
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Moment):
            return self.julian_day < other.julian_day
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.julian_day)
