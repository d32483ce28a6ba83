"""Date Value Type
---------------

Immutable, timezone-aware wall-clock date used by every period.

Supports:
  - Keywords: "now", "today", "yesterday", "yesterdaySameTime"
  - ISO-like strings: "2024-01-15", "2024-01-15 10:30" (python-dateutil)
  - datetime / date objects and UNIX timestamps
  - Calendar arithmetic: days, weeks, months, years (relativedelta)
  - Period boundaries: start/end of day, ISO week, month, year

Key Design Principles:
  1. Instances never change; arithmetic returns new Date objects
  2. Timezones are dateutil tz objects (default: configured default_timezone)
  3. ISO weeks start on Monday (isoweek library)
  4. Equality, ordering and hashing compare the absolute instant
"""

from __future__ import annotations
from datetime import date, datetime, timedelta
from functools import total_ordering
from typing import Optional, Union

try:
    from dateutil import parser as dateutil_parser
    from dateutil import tz as dateutil_tz
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from reportcore.config import get_setting
from reportcore.errors import InvalidDate
from reportcore.translate import translate

DateLike = Union["Date", datetime, date, int, float, str]

RELATIVE_KEYWORDS = ("now", "today", "yesterday", "yesterdaySameTime")


def get_timezone(name: Optional[str] = None):
    """
    Resolve a timezone name to a tzinfo object.

    Args:
        name: IANA name ("Europe/Paris"), "UTC", or None/"" for the
            configured default timezone

    Returns:
        dateutil tzinfo

    Raises:
        InvalidDate: If the timezone name is unknown
    """
    if not name:
        name = get_setting("default_timezone", "UTC")
    if name.upper() == "UTC":
        return dateutil_tz.UTC
    tzinfo = dateutil_tz.gettz(name)
    if tzinfo is None:
        raise InvalidDate(name, translate("General_ExceptionInvalidTimezone", name))
    return tzinfo


def _now(tzinfo) -> datetime:
    """Current wall-clock time in tzinfo; tests replace it to freeze the clock."""
    return datetime.now(tzinfo)


def _midnight(d: date, tzinfo) -> datetime:
    return datetime(d.year, d.month, d.day, tzinfo=tzinfo)


@total_ordering
class Date:
    """Immutable timezone-aware date.

    Build instances with Date.factory(); the constructor expects an
    already-aware datetime (naive values are taken as UTC).
    """

    __slots__ = ("_dt",)

    def __init__(self, dt: datetime):
        if not isinstance(dt, datetime):
            raise InvalidDate(dt)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=dateutil_tz.UTC)
        object.__setattr__(self, "_dt", dt)

    def __setattr__(self, name, value):
        raise AttributeError("Date objects are immutable")

    # ---- Construction ----

    @classmethod
    def factory(cls, value: DateLike, timezone: Optional[str] = None) -> "Date":
        """
        Create a Date from any supported representation.

        Args:
            value: Date, datetime, date, UNIX timestamp, keyword or date string
            timezone: Timezone for keywords and naive values (default: config)

        Returns:
            Date

        Raises:
            InvalidDate: If the value cannot be interpreted as a date

        Examples:
            >>> Date.factory("2024-01-15").to_string()
            '2024-01-15'

            >>> Date.factory("today", "Europe/Paris")  # midnight, Paris time
            Date('...T00:00:00+01:00')
        """
        if isinstance(value, Date):
            return value

        tzinfo = get_timezone(timezone)

        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=tzinfo)
            return cls(value)

        if isinstance(value, date):
            return cls(_midnight(value, tzinfo))

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return cls(datetime.fromtimestamp(value, tzinfo))
            except (OverflowError, OSError, ValueError) as e:
                raise InvalidDate(value) from e

        if isinstance(value, str):
            return cls._from_string(value.strip(), tzinfo)

        raise InvalidDate(value)

    @classmethod
    def _from_string(cls, value: str, tzinfo) -> "Date":
        if value in RELATIVE_KEYWORDS:
            now = _now(tzinfo)
            if value == "now":
                return cls(now)
            if value == "yesterdaySameTime":
                return cls(now - timedelta(days=1))
            today = _midnight(now.date(), tzinfo)
            if value == "yesterday":
                return cls(today - timedelta(days=1))
            return cls(today)

        if not value:
            raise InvalidDate(value)

        try:
            parsed = dateutil_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise InvalidDate(value) from e

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=tzinfo)
        return cls(parsed)

    # ---- Accessors ----

    @property
    def datetime(self) -> datetime:
        return self._dt

    @property
    def tzinfo(self):
        return self._dt.tzinfo

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    def isoweekday(self) -> int:
        """Day of week, 1 = Monday ... 7 = Sunday."""
        return self._dt.isoweekday()

    def date(self) -> date:
        return self._dt.date()

    def get_timestamp(self) -> int:
        """UNIX timestamp (seconds) of this instant."""
        return int(self._dt.timestamp())

    def to_string(self, fmt: Optional[str] = None) -> str:
        """Format with a strftime pattern (default: configured date_format)."""
        return self._dt.strftime(fmt or get_setting("date_format", "%Y-%m-%d"))

    # ---- Arithmetic ----

    def add_day(self, days: int) -> "Date":
        return Date(self._dt + timedelta(days=days))

    def sub_day(self, days: int) -> "Date":
        return Date(self._dt - timedelta(days=days))

    def add_period(self, n: int, kind: str) -> "Date":
        """
        Move by n periods of the given kind (day, week, month, year).

        Month and year steps clamp to the end of shorter months:
        2024-01-31 + 1 month = 2024-02-29.
        """
        if kind == "day":
            delta = relativedelta(days=n)
        elif kind == "week":
            delta = relativedelta(weeks=n)
        elif kind == "month":
            delta = relativedelta(months=n)
        elif kind == "year":
            delta = relativedelta(years=n)
        else:
            raise ValueError(f"Unknown period kind: {kind}")
        return Date(self._dt + delta)

    def start_of(self, kind: str) -> "Date":
        """
        First day (at midnight) of the day/week/month/year containing this date.

        Examples:
            >>> Date.factory("2024-01-17").start_of("week").to_string()  # Wednesday
            '2024-01-15'
        """
        d = self.date()
        if kind == "day":
            start = d
        elif kind == "week":
            start = Week.withdate(d).monday()
        elif kind == "month":
            start = d.replace(day=1)
        elif kind == "year":
            start = d.replace(month=1, day=1)
        else:
            raise ValueError(f"Unknown period kind: {kind}")
        return Date(_midnight(start, self.tzinfo))

    def end_of(self, kind: str) -> "Date":
        """Last day (at midnight) of the day/week/month/year containing this date."""
        d = self.date()
        if kind == "day":
            end = d
        elif kind == "week":
            end = Week.withdate(d).sunday()
        elif kind == "month":
            end = d + relativedelta(day=31)
        elif kind == "year":
            end = d.replace(month=12, day=31)
        else:
            raise ValueError(f"Unknown period kind: {kind}")
        return Date(_midnight(end, self.tzinfo))

    # ---- Comparison ----

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt < other._dt

    def __hash__(self):
        return hash(self._dt)

    def __repr__(self):
        return f"Date({self._dt.isoformat()!r})"

    def __str__(self):
        return self.to_string()


__all__ = [
    "Date",
    "DateLike",
    "RELATIVE_KEYWORDS",
    "get_timezone",
]
