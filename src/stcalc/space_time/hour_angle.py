import math
from dataclasses import InitVar, dataclass
from typing import Dict

from ..constants import DEGREES_PER_HOUR
from .errors import InvalidArgumentError

# Remainders are snapped to these decimals of a second and of a minute
# before splitting, so 59.99999999999979s carries into the next minute.
SECONDS_DECIMALS = 9
MINUTES_DECIMALS = 11


def _check_range(name: str, value: float, upper: int) -> None:
    if value < 0 or value > upper:
        raise InvalidArgumentError(
            f"{name.capitalize()} must be between 0 and {upper}", name
        )


@dataclass(frozen=True)
class HourAngle:
    """An angle in sexagesimal hours, where 15 degrees make one hour.

    Built directly from hours, minutes and seconds, each component is range
    checked. Built with from_decimal_degrees() nothing is checked: an angle
    outside [0, 360) gives hours outside [0, 24), so callers reduce first
    when they need a clock reading.
    """

    hours: float
    minutes: float
    seconds: float
    _validate: InitVar[bool] = True

    def __post_init__(self, _validate: bool) -> None:
        """Validate the components."""
        if not _validate:
            return
        _check_range("hours", self.hours, 23)
        _check_range("minutes", self.minutes, 59)
        _check_range("seconds", self.seconds, 59)

    @classmethod
    def from_decimal_degrees(cls, degrees: float) -> "HourAngle":
        """Split a decimal-degree angle into hours, minutes and seconds.

        Args:
            degrees: Angle in degrees, normally already in [0, 360)

        Returns:
            HourAngle: Whole hours and minutes with fractional seconds
        """
        decimal_hours = degrees / DEGREES_PER_HOUR
        hours = math.floor(decimal_hours)
        total_seconds = round((decimal_hours - hours) * 3600, SECONDS_DECIMALS)
        minutes, seconds = divmod(total_seconds, 60)
        if minutes >= 60:
            hours += 1
            minutes -= 60

        return cls(float(hours), float(minutes), seconds, False)

    @property
    def decimal_hours(self) -> float:
        return self.hours + (self.minutes / 60) + (self.seconds / 3600)

    def to_decimal_degrees(self) -> float:
        return self.decimal_hours * DEGREES_PER_HOUR

    def format_hms(self, precision: int = 3) -> str:
        """Format with fractional seconds, e.g. "6h 48m 12.799s".

        Seconds that round up to 60 at the given precision carry into the
        minutes, and minutes into the hours.
        """
        hours, minutes = self.hours, self.minutes
        seconds = round(self.seconds, precision)
        if seconds >= 60:
            seconds -= 60
            minutes += 1
        if minutes >= 60:
            minutes -= 60
            hours += 1
        return f"{hours:.0f}h {minutes:.0f}m {seconds:.{precision}f}s"

    def to_dict(self) -> Dict[str, float]:
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "decimal_degrees": self.to_decimal_degrees(),
        }

    def __str__(self) -> str:
        # Hours and minutes are truncated toward zero and seconds rounded
        # half-to-even, so 59.5s or more shows as "60s".
        degrees = self.to_decimal_degrees()
        h = math.trunc(math.trunc(degrees) / DEGREES_PER_HOUR)
        raw_minutes = round(((degrees / DEGREES_PER_HOUR) - h) * 60, MINUTES_DECIMALS)
        m = math.trunc(raw_minutes)
        s = (raw_minutes - m) * 60
        return f"{h}h {m}m {round(s)}s"
