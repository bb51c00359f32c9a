"""Tests for Moment and its Julian Day conversions."""

import math
import unittest
from datetime import datetime, timedelta, timezone

from stcalc.space_time.errors import InvalidArgumentError
from stcalc.space_time.moment import Moment
from stcalc.space_time.pythonic_datetimes import NaiveDateTimeError


def fields(moment):
    return (
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.millisecond,
    )


class TestCalendarToJulianDay(unittest.TestCase):
    """Calendar fields to Julian Day, checked against Meeus chapter 7."""

    def test_j2000_epoch(self):
        moment = Moment(2000, 1, 1, 12, 0, 0)
        self.assertEqual(moment.julian_day, 2451545.0)
        self.assertEqual(moment.time_t, 0.0)
        self.assertEqual(moment.day_d, 0.0)

    def test_gregorian_dates(self):
        # Sputnik 1 launch, Meeus example 7.a
        self.assertAlmostEqual(
            Moment.from_fractional_day(1957, 10, 4.81).julian_day, 2436116.31, places=6
        )
        # Meeus example 12.b
        self.assertAlmostEqual(
            Moment(1987, 4, 10, 19, 21).julian_day, 2446896.30625, places=6
        )
        self.assertAlmostEqual(
            Moment(2020, 3, 3, 20, 0, 0).julian_day, 2458912.333333333, places=6
        )

    def test_julian_calendar_dates(self):
        # Meeus example 7.b
        self.assertEqual(Moment(333, 1, 27, 12).julian_day, 1842713.0)
        self.assertAlmostEqual(
            Moment.from_fractional_day(837, 4, 10.3).julian_day, 2026871.8, places=6
        )
        # Epoch of the Julian Day count
        self.assertEqual(Moment(-4712, 1, 1, 12).julian_day, 0.0)

    def test_calendar_reform_is_continuous(self):
        last_julian = Moment(1582, 10, 4)
        first_gregorian = Moment(1582, 10, 15)
        self.assertEqual(last_julian.julian_day, 2299159.5)
        self.assertEqual(first_gregorian.julian_day, 2299160.5)
        self.assertEqual(first_gregorian.julian_day - last_julian.julian_day, 1.0)

    def test_aliases_and_j2000_offsets(self):
        moment = Moment(2020, 3, 3, 20)
        self.assertEqual(moment.jd, moment.julian_day)
        self.assertEqual(moment.jde, moment.julian_day)
        self.assertAlmostEqual(moment.day_d, 7367.333333333, places=6)
        self.assertAlmostEqual(moment.time_t, 0.2017065937, places=9)

    def test_day_of_month(self):
        self.assertEqual(Moment(2000, 1, 1, 12).day_of_month, 1.5)
        self.assertAlmostEqual(
            Moment(1957, 10, 4, 19, 26, 24).day_of_month, 4.81, places=9
        )
        self.assertAlmostEqual(
            Moment(2000, 1, 1, 0, 0, 0, 500).day_of_month, 1 + 0.5 / 86400, places=12
        )

    def test_out_of_range_fields_are_not_validated(self):
        # Month 13 of 2020 lands on January 2021
        self.assertEqual(Moment(2020, 13, 1), Moment(2021, 1, 1))
        self.assertEqual(Moment(2020, 1, 32), Moment(2020, 2, 1))


class TestCalendarClassification(unittest.TestCase):
    """Julian/Gregorian partition around the October 1582 reform."""

    def test_last_julian_day(self):
        moment = Moment(1582, 10, 4)
        self.assertTrue(moment.is_julian_date())
        self.assertFalse(moment.is_gregorian_date())

    def test_first_gregorian_day(self):
        moment = Moment(1582, 10, 15)
        self.assertFalse(moment.is_julian_date())
        self.assertTrue(moment.is_gregorian_date())

    def test_skipped_days(self):
        self.assertTrue(Moment(1582, 10, 5).is_julian_date())
        self.assertFalse(Moment(1582, 10, 5).is_gregorian_date())
        for day in range(6, 15):
            moment = Moment(1582, 10, day)
            self.assertTrue(moment.is_julian_date(), day)
            self.assertTrue(moment.is_gregorian_date(), day)

    def test_other_years_and_months(self):
        self.assertTrue(Moment(1581, 12, 31).is_julian_date())
        self.assertTrue(Moment(1582, 9, 30).is_julian_date())
        self.assertTrue(Moment(1582, 11, 1).is_gregorian_date())
        self.assertTrue(Moment(1583, 1, 1).is_gregorian_date())
        self.assertFalse(Moment(-500, 6, 1).is_gregorian_date())


class TestJulianDayToCalendar(unittest.TestCase):
    """Julian Day back to calendar fields."""

    def test_j2000_epoch(self):
        self.assertEqual(
            fields(Moment.from_julian_day(2451545.0)), (2000, 1, 1, 12, 0, 0, 0)
        )

    def test_gregorian_date(self):
        # Meeus example 7.c
        self.assertEqual(
            fields(Moment.from_julian_day(2436116.31)), (1957, 10, 4, 19, 26, 24, 0)
        )

    def test_julian_calendar_dates(self):
        self.assertEqual(
            fields(Moment.from_julian_day(1842713.0)), (333, 1, 27, 12, 0, 0, 0)
        )
        self.assertEqual(
            fields(Moment.from_julian_day(2026871.8)), (837, 4, 10, 7, 12, 0, 0)
        )
        self.assertEqual(
            fields(Moment.from_julian_day(0.0)), (-4712, 1, 1, 12, 0, 0, 0)
        )

    def test_reform_boundary(self):
        self.assertEqual(
            fields(Moment.from_julian_day(2299159.5)), (1582, 10, 4, 0, 0, 0, 0)
        )
        self.assertEqual(
            fields(Moment.from_julian_day(2299160.5)), (1582, 10, 15, 0, 0, 0, 0)
        )

    def test_year_for_months_after_february(self):
        # The algorithm's year offset differs between Jan/Feb and later months
        self.assertEqual(Moment.from_julian_day(2451604.5).year, 2000)
        self.assertEqual(Moment.from_julian_day(2451604.5).month, 3)
        self.assertEqual(Moment.from_julian_day(2451574.5).year, 2000)
        self.assertEqual(Moment.from_julian_day(2451574.5).month, 1)

    def test_roundtrip(self):
        moments = [
            Moment(2025, 3, 19, 17, 0, 0, 123),
            Moment(2000, 2, 29, 6, 30, 15),
            Moment(1999, 12, 31, 23, 59, 59, 999),
            Moment(1970, 1, 1),
            Moment(2038, 1, 19, 3, 14, 7),
            Moment(1600, 3, 1, 8, 0, 0),
            Moment(1582, 10, 15, 1, 2, 3, 4),
            Moment(1582, 10, 4, 23, 0, 0),
            Moment(837, 4, 10, 7, 12),
            Moment(-1000, 7, 12, 12),
        ]
        for moment in moments:
            with self.subTest(moment=str(moment)):
                roundtrip = Moment.from_julian_day(moment.julian_day)
                self.assertEqual(fields(roundtrip), fields(moment))

    def test_nan_is_rejected(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            Moment.from_julian_day(float("nan"))
        self.assertEqual(ctx.exception.argument, "julian_day")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_infinity_is_rejected(self):
        for value in (math.inf, -math.inf):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError) as ctx:
                    Moment.from_julian_day(value)
                self.assertEqual(ctx.exception.argument, "julian_day")


class TestMomentConstruction(unittest.TestCase):
    """Alternate constructors and rendering."""

    def test_from_fractional_day(self):
        moment = Moment.from_fractional_day(1957, 10, 4.81)
        self.assertEqual(fields(moment), (1957, 10, 4, 19, 26, 24, 0))

    def test_from_fractional_day_rejects_nan(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            Moment.from_fractional_day(2000, 1, math.nan)
        self.assertEqual(ctx.exception.argument, "day")

    def test_from_fractional_day_rejects_infinity(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            Moment.from_fractional_day(2000, 1, math.inf)
        self.assertEqual(ctx.exception.argument, "day")

    def test_from_datetime(self):
        dt = datetime(2020, 3, 3, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=-8)))
        self.assertEqual(
            fields(Moment.from_datetime(dt)), (2020, 3, 3, 20, 0, 0, 123)
        )

    def test_from_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            Moment.from_datetime(datetime(2020, 3, 3, 12, 0))

    def test_to_datetime(self):
        self.assertEqual(
            Moment(2020, 3, 3, 20, 0, 0, 250).to_datetime(),
            datetime(2020, 3, 3, 20, 0, 0, 250000, tzinfo=timezone.utc),
        )

    def test_str(self):
        self.assertEqual(str(Moment(2020, 3, 3, 20, 0, 0)), "2020-03-03 20:00:00Z")
        self.assertEqual(str(Moment(837, 4, 10, 7, 12)), "0837-04-10 07:12:00Z")
        self.assertEqual(str(Moment(-4712, 1, 1, 12)), "-4712-01-01 12:00:00Z")

    def test_immutable(self):
        moment = Moment(2000, 1, 1)
        with self.assertRaises(AttributeError):
            moment.year = 2001


class TestMomentEquality(unittest.TestCase):
    """Moments compare by Julian Day, not by field."""

    def test_same_fields(self):
        self.assertEqual(Moment(2000, 1, 1, 12), Moment(2000, 1, 1, 12, 0, 0, 0))
        self.assertNotEqual(Moment(2000, 1, 1, 12), Moment(2000, 1, 1, 12, 0, 0, 1))

    def test_equal_across_calendars(self):
        # 5 Oct 1582 on the Julian calendar is 15 Oct 1582 on the Gregorian
        julian = Moment(1582, 10, 5)
        gregorian = Moment(1582, 10, 15)
        self.assertEqual(julian, gregorian)
        self.assertEqual(hash(julian), hash(gregorian))
        self.assertEqual(len({julian, gregorian}), 1)
        self.assertEqual(Moment(1582, 10, 10), Moment(1582, 10, 20))

    def test_ordering(self):
        self.assertLess(Moment(2000, 1, 1), Moment(2000, 1, 1, 0, 0, 0, 1))
        self.assertGreater(Moment(1582, 10, 15), Moment(1582, 10, 4))
        self.assertEqual(
            max(Moment(1999, 12, 31), Moment(2000, 1, 1), Moment(1970, 1, 1)),
            Moment(2000, 1, 1),
        )

    def test_other_types(self):
        self.assertNotEqual(Moment(2000, 1, 1, 12), 2451545.0)


if __name__ == "__main__":
    unittest.main()
