"""Sidereal time calculator: Julian Day and hour-angle arithmetic."""

from .space_time import (
    HourAngle,
    InvalidArgumentError,
    Moment,
    SiderealTime,
    calculate_sidereal_time,
    reduce_angle,
)

__version__ = "0.1.0"

__all__ = [
    "HourAngle",
    "InvalidArgumentError",
    "Moment",
    "SiderealTime",
    "calculate_sidereal_time",
    "reduce_angle",
]
