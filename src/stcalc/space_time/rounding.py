import math
from typing import Tuple

from ..constants import MILLISECONDS_PER_DAY


def round_half_away_from_zero(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return int(math.ceil(value - 0.5))


def split_fractional_days(days: float) -> Tuple[int, int, int, int, int]:
    """Split a fractional day count into whole calendar units.

    The value is first rounded to the nearest millisecond, then divided into
    days, hours, minutes, seconds and milliseconds, truncating at each level
    and carrying the remainder down.

    Args:
        days: Number of days, e.g. 4.81 for the 4th day at 19:26:24

    Returns:
        Tuple[int, int, int, int, int]: days, hours, minutes, seconds, milliseconds
    """
    total_ms = round_half_away_from_zero(days * MILLISECONDS_PER_DAY)
    # truncate toward zero so negative spans split symmetrically
    sign = -1 if total_ms < 0 else 1
    whole_days, rest = divmod(abs(total_ms), MILLISECONDS_PER_DAY)
    hours, rest = divmod(rest, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, milliseconds = divmod(rest, 1000)
    return (
        sign * whole_days,
        sign * hours,
        sign * minutes,
        sign * seconds,
        sign * milliseconds,
    )
