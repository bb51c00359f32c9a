from .angles import reduce_angle
from .errors import InvalidArgumentError
from .hour_angle import HourAngle
from .moment import Moment
from .pythonic_datetimes import NaiveDateTimeError
from .sidereal import SiderealTime, calculate_sidereal_time

__all__ = [
    "reduce_angle",
    "InvalidArgumentError",
    "HourAngle",
    "Moment",
    "NaiveDateTimeError",
    "SiderealTime",
    "calculate_sidereal_time",
]
