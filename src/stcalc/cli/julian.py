"""CLI commands for Julian Day and hour-angle conversions."""

import math
from typing import Optional

import click

from ..space_time.angles import reduce_angle
from ..space_time.errors import InvalidArgumentError
from ..space_time.hour_angle import HourAngle
from ..space_time.moment import Moment
from .common import parse_date, parse_time, usage_error


@click.command()
@click.argument("date")
@click.argument("time", required=False)
def julian(date: str, time: Optional[str]) -> None:
    """Print the Julian Day of a UTC DATE (YYYY-MM-DD) and optional TIME (HH:MM)."""
    day = parse_date(date)
    moment = Moment(day.year, day.month, day.day)
    if time:
        clock = parse_time(time)
        moment = Moment(
            day.year, day.month, day.day, clock.hour, clock.minute, clock.second
        )

    click.echo(f"UTC DateTime: {moment}")
    click.echo(f"JD: {moment.julian_day}")
    click.echo(f"T: {moment.time_t}")
    click.echo(f"D: {moment.day_d}")
    click.echo(f"Julian calendar: {moment.is_julian_date()}")
    click.echo(f"Gregorian calendar: {moment.is_gregorian_date()}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("jd")
def calendar(jd: str) -> None:
    """Print the calendar date of a Julian Day JD."""
    try:
        value = float(jd)
    except ValueError:
        raise usage_error(f"Invalid Julian Day: {jd}")
    if not math.isfinite(value):
        raise usage_error(f"Invalid Julian Day: {jd}")

    try:
        moment = Moment.from_julian_day(value)
    except InvalidArgumentError as e:
        raise usage_error(str(e))

    click.echo(f"JD: {value}")
    click.echo(f"UTC DateTime: {moment}")
    click.echo(f"Millisecond: {moment.millisecond}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("degrees")
@click.option(
    "--reduce",
    is_flag=True,
    help="Reduce the angle into [0, 360) before converting.",
)
@click.option(
    "--precision",
    type=int,
    default=None,
    help="Show seconds with this many decimals instead of rounding to whole seconds.",
)
def hms(degrees: str, reduce: bool, precision: Optional[int]) -> None:
    """Print a decimal-degree angle DEGREES as hours, minutes and seconds."""
    try:
        value = float(degrees)
    except ValueError:
        raise usage_error(f"Invalid angle: {degrees}")
    if not math.isfinite(value):
        raise usage_error(f"Invalid angle: {degrees}")

    if reduce:
        value = reduce_angle(value)
    hour_angle = HourAngle.from_decimal_degrees(value)
    if precision is None:
        click.echo(str(hour_angle))
    else:
        click.echo(hour_angle.format_hms(precision))
