"""Mean sidereal time at Greenwich and at an observer's longitude."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..constants import DAYS_PER_JULIAN_CENTURY, GMST_COEFFICIENTS, J2000_JULIAN_DAY
from ..logging import get_logger
from .angles import reduce_angle
from .hour_angle import HourAngle
from .moment import Moment

logger = get_logger(__name__)


@dataclass(frozen=True)
class SiderealTime:
    """Result of a sidereal time calculation.

    lmst_degrees is gmst_degrees + longitude without a second reduction, so
    for western longitudes near 0h GMST it can be negative, and for eastern
    ones it can reach past 360. lmst then carries hours outside [0, 24).
    """

    julian_day: float
    t: float
    theta0: float
    gmst_degrees: float
    gmst: HourAngle
    longitude: float
    lmst_degrees: float
    lmst: HourAngle

    def to_dict(self) -> Dict[str, Any]:
        return {
            "julian_day": self.julian_day,
            "t": self.t,
            "theta0": self.theta0,
            "longitude": self.longitude,
            "gmst": {"degrees": self.gmst_degrees, "hms": str(self.gmst)},
            "lmst": {"degrees": self.lmst_degrees, "hms": str(self.lmst)},
        }


def greenwich_mean_sidereal_angle(julian_day: float) -> float:
    """
    Mean sidereal time at Greenwich as an unreduced angle (Meeus eq. 12.4).

    Parameters:
    julian_day (float): The Julian Date in UTC.

    Returns:
    float: theta0 in degrees, possibly many full turns.
    """
    c0, c1, c2, c3 = GMST_COEFFICIENTS

    # Days and Julian centuries since J2000.0
    d = julian_day - J2000_JULIAN_DAY
    t = d / DAYS_PER_JULIAN_CENTURY

    return c0 + c1 * d + (c2 * t * t) - (t * t * t / c3)


def calculate_sidereal_time(moment: Moment, longitude: float) -> SiderealTime:
    """
    Calculate Greenwich and Local Mean Sidereal Time for a UTC moment.

    Parameters:
    moment (Moment): The instant, in UTC.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.

    Returns:
    SiderealTime: GMST and LMST in degrees and as hour angles.
    """
    logger.debug(f"Sidereal time at {moment}, longitude {longitude}")
    return sidereal_time_from_julian(moment.julian_day, longitude)


def sidereal_time_from_julian(julian_date: float, longitude: float) -> SiderealTime:
    """
    Calculate sidereal time for a Julian Date, used as given.

    Unlike Moment.from_julian_day, nothing here rounds the date to the
    millisecond, so result.julian_day is julian_date.
    """
    jd = julian_date
    t = (jd - J2000_JULIAN_DAY) / DAYS_PER_JULIAN_CENTURY
    theta0 = greenwich_mean_sidereal_angle(jd)

    gmst_degrees = reduce_angle(theta0)
    gmst = HourAngle.from_decimal_degrees(gmst_degrees)

    # Sidereal time at the observer is GMST plus the east longitude.
    # The sum is not reduced again.
    lmst_degrees = gmst_degrees + longitude
    lmst = HourAngle.from_decimal_degrees(lmst_degrees)

    logger.debug(f"JD={jd} theta0={theta0} GMST={gmst_degrees} LMST={lmst_degrees}")
    return SiderealTime(
        julian_day=jd,
        t=t,
        theta0=theta0,
        gmst_degrees=gmst_degrees,
        gmst=gmst,
        longitude=longitude,
        lmst_degrees=lmst_degrees,
        lmst=lmst,
    )


def sidereal_time_from_datetime(dt: datetime, longitude: float) -> SiderealTime:
    return calculate_sidereal_time(Moment.from_datetime(dt), longitude)
