"""CLI command for computing sidereal time at a longitude."""

import json
from datetime import datetime
from typing import List, Optional

import click
import pytz

from ..logging import get_logger
from ..space_time.moment import Moment
from ..space_time.pythonic_datetimes import local_to_utc, resolve_timezone
from ..space_time.sidereal import SiderealTime, calculate_sidereal_time
from .common import parse_date, parse_longitude, parse_time, usage_error

logger = get_logger(__name__)


def _now() -> datetime:
    """Current host wall-clock time, naive."""
    return datetime.now()


def format_report(
    result: SiderealTime, local_dt: datetime, utc_moment: Moment
) -> List[str]:
    """Render a sidereal time result as labeled lines of text."""
    return [
        f"Longitude: {result.longitude}",
        f"Local DateTime: {local_dt.replace(tzinfo=None, microsecond=0)}",
        f"UTC DateTime: {utc_moment}",
        "",
        f"JD: {result.julian_day}",
        f"T: {result.t}",
        f"theta0 from Meeus formula (12.4): {result.theta0}",
        "",
        f"Greenwich Mean Sidereal Time (dec deg): {result.gmst_degrees}",
        f"Greenwich Mean Sidereal Time (HMS):     {result.gmst}",
        f"Local Mean Sidereal Time (dec deg):     {result.lmst_degrees}",
        f"Local Mean Sidereal Time (HMS):         {result.lmst}",
    ]


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("longitude")
@click.argument("date", required=False)
@click.argument("time", required=False)
@click.option(
    "--tz",
    help="IANA timezone of DATE and TIME (e.g. 'America/Los_Angeles'). Defaults to the host timezone.",
)
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: 'text' for labeled lines, 'json' for machine-readable data. Defaults to 'text'.",
)
def sidereal(
    longitude: str,
    date: Optional[str],
    time: Optional[str],
    tz: Optional[str],
    format: str,
) -> None:
    """Compute Greenwich and Local Mean Sidereal Time.

    LONGITUDE is in decimal degrees, east positive, between -180 and 180.
    DATE (YYYY-MM-DD) and TIME (HH:MM) are local to the host timezone, or to
    --tz, and default to now.

    Examples:

    Sidereal time in Portland, Oregon at 1 PM local time:
        stcalc sidereal -122.675 2020-03-03 13:00 --tz America/Los_Angeles

    Sidereal time at Greenwich right now:
        stcalc sidereal 0
    """
    lon = parse_longitude(longitude)

    now = _now()
    local_date = parse_date(date) if date else now.date()
    local_time = parse_time(time) if time else now.time()

    try:
        zone = resolve_timezone(tz)
    except pytz.UnknownTimeZoneError:
        raise usage_error(f"Unknown timezone: {tz}")

    local_dt = datetime.combine(local_date, local_time)
    utc_dt = local_to_utc(local_dt, zone)
    logger.info(f"Local {local_dt} is {utc_dt.isoformat()}")

    moment = Moment.from_datetime(utc_dt)
    result = calculate_sidereal_time(moment, lon)

    if format == "json":
        data = result.to_dict()
        data["local_datetime"] = local_dt.isoformat()
        data["utc_datetime"] = str(moment)
        click.echo(json.dumps(data, indent=2))
        return

    for line in format_report(result, local_dt, moment):
        click.echo(line)
