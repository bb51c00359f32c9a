"""Astronomical constants shared across stcalc."""

# Julian Day of the J2000.0 epoch (2000-01-01 12:00 UTC)
J2000_JULIAN_DAY = 2451545.0

# Days in a Julian century
DAYS_PER_JULIAN_CENTURY = 36525.0

# First Julian Day number (Z) that falls on the Gregorian calendar
GREGORIAN_REFORM_JDN = 2299161

SECONDS_PER_DAY = 86400.0
MILLISECONDS_PER_DAY = 86_400_000

DEGREES_PER_HOUR = 15.0

# Meeus, Astronomical Algorithms, eq. 12.4
GMST_COEFFICIENTS = (280.46061837, 360.98564736629, 0.000387933, 38710000.0)
