"""
Command-line interface utilities for stcalc.

This module provides the logging configuration shared by the commands and
the parsers for the longitude, date and time arguments.
"""

import logging
from datetime import date, datetime, time
from typing import Any, Dict

import click

from ..logging import set_log_level

USAGE = (
    "Enter your longitude and (optionally) local date and time. "
    "Usage: stcalc sidereal -122.675 2020-03-03 13:00"
)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags ("quiet", "debug", "verbose")
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("stcalc").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def usage_error(message: str) -> click.UsageError:
    """Build the error every invalid input ends in: a hint plus the usage line."""
    return click.UsageError(f"{message}\n{USAGE}")


def parse_longitude(value: str) -> float:
    """Parse a longitude in decimal degrees, east positive.

    Raises:
        click.UsageError: If the value is not a number in [-180, 180]
    """
    try:
        longitude = float(value)
    except ValueError:
        raise usage_error("Please enter a valid longitude between -180 and 180.")
    if not -180 <= longitude <= 180:
        raise usage_error("Please enter a valid longitude between -180 and 180.")
    return longitude


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD date.

    Raises:
        click.UsageError: If the value does not match the format
    """
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise usage_error("Please enter a valid date in the format YYYY-MM-DD")


def parse_time(value: str) -> time:
    """Parse an HH:MM or HH:MM:SS time of day.

    Raises:
        click.UsageError: If the value matches neither format
    """
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise usage_error("Please enter a valid time in the format HH:MM")
