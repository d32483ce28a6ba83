"""Tests for the Date value type."""

import pytest
from datetime import date, datetime, timedelta, timezone

from reportcore.errors import InvalidDate
from reportcore.period.perioddate import Date, get_timezone


class TestDateFactory:
    """Test building Date objects from supported representations"""

    def test_iso_string(self):
        """Test plain Y-m-d string"""
        d = Date.factory("2024-01-15")
        assert d.to_string() == "2024-01-15"
        assert (d.year, d.month, d.day) == (2024, 1, 15)

    def test_default_timezone_is_utc(self):
        """Test naive input is placed in UTC by default"""
        d = Date.factory("2024-01-15")
        assert d.datetime.utcoffset() == timedelta(0)

    def test_explicit_timezone(self):
        """Test naive input is placed in the requested timezone"""
        d = Date.factory("2024-01-15", "Europe/Paris")
        assert d.datetime.utcoffset() == timedelta(hours=1)
        assert d.to_string() == "2024-01-15"

    def test_date_passthrough(self):
        """Test a Date is returned unchanged"""
        d = Date.factory("2024-01-15")
        assert Date.factory(d) is d

    def test_datetime_naive(self):
        """Test naive datetime keeps its wall-clock time"""
        d = Date.factory(datetime(2024, 1, 15, 10, 30))
        assert d.datetime.hour == 10
        assert d.datetime.tzinfo is not None

    def test_datetime_aware(self):
        """Test aware datetime keeps its own timezone"""
        dt = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert Date.factory(dt, "Europe/Paris").datetime == dt

    def test_date_object(self):
        """Test date objects become midnight"""
        d = Date.factory(date(2024, 1, 15))
        assert d.datetime.hour == 0
        assert d.to_string() == "2024-01-15"

    def test_timestamp(self):
        """Test UNIX timestamps"""
        assert Date.factory(0).to_string() == "1970-01-01"
        assert Date.factory("1970-01-02").get_timestamp() == 86400

    def test_today_is_midnight(self, frozen_now):
        """Test 'today' has no time of day"""
        d = Date.factory("today")
        assert d.to_string("%Y-%m-%d %H:%M:%S") == "2024-01-10 00:00:00"

    def test_today_in_timezone(self, frozen_now):
        """Test 'today' is the calendar day of the requested timezone"""
        assert Date.factory("today", "Pacific/Kiritimati").to_string() == "2024-01-11"

    def test_yesterday(self, frozen_now):
        """Test 'yesterday' is one day before 'today'"""
        assert Date.factory("yesterday") == Date.factory("today").sub_day(1)
        assert Date.factory("yesterday").to_string() == "2024-01-09"

    def test_now_and_yesterday_same_time(self, frozen_now):
        """Test 'now' keeps the time and 'yesterdaySameTime' is a day earlier"""
        now = Date.factory("now")
        before = Date.factory("yesterdaySameTime")
        assert now.to_string("%Y-%m-%d %H:%M") == "2024-01-10 12:00"
        assert now.datetime - before.datetime == timedelta(days=1)


class TestDateFactoryErrors:
    """Test rejected inputs"""

    @pytest.mark.parametrize("value", ["", "not a date", "last7", "2024-02-30", None, True, [2024, 1, 1]])
    def test_invalid_values(self, value):
        """Test values that are not dates raise InvalidDate"""
        with pytest.raises(InvalidDate):
            Date.factory(value)

    def test_invalid_date_is_value_error(self):
        """Test InvalidDate can be caught as ValueError"""
        with pytest.raises(ValueError):
            Date.factory("not a date")

    def test_unknown_timezone(self):
        """Test unknown timezone names raise InvalidDate"""
        with pytest.raises(InvalidDate):
            get_timezone("Not/AZone")
        with pytest.raises(InvalidDate):
            Date.factory("today", "Not/AZone")

    def test_unknown_timezone_message(self):
        """Test the unknown timezone error comes from the message catalog"""
        with pytest.raises(InvalidDate) as excinfo:
            get_timezone("Not/AZone")
        assert str(excinfo.value) == "The timezone 'Not/AZone' is not a valid timezone."
        assert excinfo.value.value == "Not/AZone"


class TestDateArithmetic:
    """Test calendar arithmetic"""

    def test_add_and_sub_day(self):
        """Test day arithmetic across a month boundary"""
        d = Date.factory("2024-02-28")
        assert d.add_day(2).to_string() == "2024-03-01"
        assert d.sub_day(28).to_string() == "2024-01-31"

    def test_add_day_across_dst(self):
        """Test day arithmetic keeps midnight across a DST change"""
        d = Date.factory("2024-03-31", "Europe/Paris").add_day(1)
        assert d.to_string() == "2024-04-01"
        assert d.datetime.hour == 0
        assert d.datetime.utcoffset() == timedelta(hours=2)

    def test_add_period_month_clamps(self):
        """Test month steps clamp to the end of shorter months"""
        d = Date.factory("2024-01-31")
        assert d.add_period(1, "month").to_string() == "2024-02-29"
        assert d.add_period(-2, "month").to_string() == "2023-11-30"

    def test_add_period_week_and_year(self):
        """Test week and year steps"""
        d = Date.factory("2024-02-29")
        assert d.add_period(1, "week").to_string() == "2024-03-07"
        assert d.add_period(1, "year").to_string() == "2025-02-28"

    def test_add_period_unknown_kind(self):
        """Test unknown kinds are rejected"""
        with pytest.raises(ValueError):
            Date.factory("2024-01-01").add_period(1, "quarter")

    @pytest.mark.parametrize("kind,start,end", [
        ("day", "2024-01-17", "2024-01-17"),
        ("week", "2024-01-15", "2024-01-21"),
        ("month", "2024-01-01", "2024-01-31"),
        ("year", "2024-01-01", "2024-12-31"),
    ])
    def test_start_and_end_of(self, kind, start, end):
        """Test boundaries of the period containing Wednesday 2024-01-17"""
        d = Date.factory("2024-01-17 15:45")
        assert d.start_of(kind).to_string() == start
        assert d.end_of(kind).to_string() == end
        assert d.start_of(kind).datetime.hour == 0

    def test_end_of_month_in_last_year(self):
        """Test the month end of December 9999 stays in range"""
        assert Date.factory("9999-12-15").end_of("month").to_string() == "9999-12-31"
        assert Date.factory("2024-01-31").end_of("month").to_string() == "2024-01-31"
        assert Date.factory("2024-02-01").end_of("month").to_string() == "2024-02-29"

    def test_iso_week_across_year(self):
        """Test ISO week of 2024-12-31 ends in 2025"""
        d = Date.factory("2024-12-31")
        assert d.start_of("week").to_string() == "2024-12-30"
        assert d.end_of("week").to_string() == "2025-01-05"


class TestDateValueSemantics:
    """Test immutability, ordering and hashing"""

    def test_immutable(self):
        """Test attributes cannot be set"""
        d = Date.factory("2024-01-15")
        with pytest.raises(AttributeError):
            d._dt = datetime(2000, 1, 1)

    def test_ordering(self):
        """Test dates order chronologically"""
        a, b = Date.factory("2024-01-15"), Date.factory("2024-01-16")
        assert a < b
        assert b >= a
        assert sorted([b, a]) == [a, b]

    def test_equality_and_hash(self):
        """Test equal instants are equal and hash alike"""
        a = Date.factory("2024-01-15")
        b = Date.factory(date(2024, 1, 15))
        assert a == b
        assert len({a, b}) == 1
        assert a != Date.factory("2024-01-15", "Europe/Paris")

    def test_to_string_format(self):
        """Test custom strftime patterns"""
        d = Date.factory("2024-01-05")
        assert d.to_string("%d/%m/%Y") == "05/01/2024"
        assert str(d) == "2024-01-05"

    def test_isoweekday(self):
        """Test Monday is 1 and Sunday is 7"""
        assert Date.factory("2024-01-15").isoweekday() == 1
        assert Date.factory("2024-01-21").isoweekday() == 7
