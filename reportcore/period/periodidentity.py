"""Period Hierarchy
----------------

Calendar periods that decompose into chronologically ordered sub-periods.

Variants:
  - Day: leaf period, no sub-periods
  - Week: 7 Day sub-periods (ISO week, Monday start)
  - Month: one Day sub-period per calendar day
  - Year: 12 Month sub-periods
  - Range: Day sub-periods covering an inclusive span, built from
    "lastN" / "previousN" shorthands or "YYYY-MM-DD,YYYY-MM-DD" literals

Key Design Principles:
  1. Sub-periods are computed on first access, exactly once per instance
  2. Label and anchor date never change after construction
  3. Boundary dates come from the deepest sub-period, so a Year starts on
     the first Day of its first Month
  4. An inverted range (start after end) is empty, not an error
"""

from __future__ import annotations
import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from reportcore.config import get_setting
from reportcore.errors import InvalidDate, InvalidPeriodKind
from reportcore.period.perioddate import Date
from reportcore.period.periodnormalize import match_last_n, parse_date_range
from reportcore.translate import translate

logger = logging.getLogger(__name__)

ISO_DATE_FORMAT = "%Y-%m-%d"

PERIOD_KINDS = ("day", "week", "month", "year")
AVAILABLE_PERIODS = "day, week, month, year, range"


class Period(ABC):
    """Base class for all periods.

    Subclasses set `label` and implement `_generate()` plus the three
    human-facing renderings. Every accessor that needs sub-periods goes
    through `_subperiods()`, which runs `_generate()` once.
    """

    label: str = None

    def __init__(self, date: Date):
        self._check_input_date(date)
        # Date is immutable; no copy needed
        self._date = date
        self._generated: Optional[tuple] = None
        self._generate_lock = threading.Lock()

    @staticmethod
    def _check_input_date(date):
        if not isinstance(date, Date):
            raise InvalidDate(date, f"The date must be a Date object. {date!r}")

    @property
    def date(self) -> Date:
        """Anchor date of the period."""
        return self._date

    def get_label(self) -> str:
        return self.label

    def get_id(self) -> int:
        """Stable integer id of the period label (config: period_ids)."""
        period_ids = get_setting("period_ids", {})
        try:
            return period_ids[self.label]
        except KeyError:
            raise InvalidPeriodKind(self.label, AVAILABLE_PERIODS) from None

    # ---- Sub-periods ----

    @abstractmethod
    def _generate(self) -> Sequence["Period"]:
        """Build the chronologically ordered sub-periods."""

    def _subperiods(self) -> tuple:
        generated = self._generated
        if generated is None:
            with self._generate_lock:
                if self._generated is None:
                    self._generated = tuple(self._generate())
                    logger.debug(
                        f"Generated {len(self._generated)} subperiods for "
                        f"{self.label} {self._date.to_string(ISO_DATE_FORMAT)}"
                    )
                generated = self._generated
        return generated

    @property
    def subperiods_computed(self) -> bool:
        return self._generated is not None

    def get_subperiods(self) -> tuple:
        """Day periods for week/month/range, Month periods for year."""
        return self._subperiods()

    def get_number_of_subperiods(self) -> int:
        return len(self._subperiods())

    # ---- Boundaries ----

    def get_date_start(self) -> Date:
        """First day of the period (descends to the first leaf)."""
        period = self
        while period.get_number_of_subperiods() > 0:
            period = period.get_subperiods()[0]
        return period.date

    def get_date_end(self) -> Date:
        """Last day of the period; can be a date in the future."""
        period = self
        while period.get_number_of_subperiods() > 0:
            period = period.get_subperiods()[-1]
        return period.date

    # ---- String forms ----

    def to_string_parts(self, fmt: Optional[str] = None) -> list[str]:
        """Each sub-period formatted with `fmt` (default: configured date_format)."""
        return [period.to_string(fmt) for period in self._subperiods()]

    def to_string(self, fmt: Optional[str] = None) -> str:
        return ",".join(self.to_string_parts(fmt))

    def to_display_string(self) -> str:
        return self.to_string()

    def get_range_string(self) -> str:
        """'<start>,<end>' in Y-m-d form, whatever the composition."""
        return (
            f"{self.get_date_start().to_string(ISO_DATE_FORMAT)},"
            f"{self.get_date_end().to_string(ISO_DATE_FORMAT)}"
        )

    def get(self, fmt: Optional[str] = None) -> str:
        """Anchor date formatted with `fmt`."""
        return self._date.to_string(fmt)

    @abstractmethod
    def get_pretty_string(self) -> str:
        ...

    @abstractmethod
    def get_localized_short_string(self) -> str:
        ...

    @abstractmethod
    def get_localized_long_string(self) -> str:
        ...

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"{type(self).__name__}({self._date.to_string(ISO_DATE_FORMAT)!r})"


def _days_between(start: Date, end: Date) -> list["Day"]:
    first = start.start_of("day")
    # Stepping one past 9999-12-31 overflows, so count the days up front
    count = (end.date() - first.date()).days + 1
    return [Day(first.add_day(i)) for i in range(count)]


def _short_month(date: Date) -> str:
    return translate(f"ShortMonth_{date.month}")


def _long_month(date: Date) -> str:
    return translate(f"LongMonth_{date.month}")


class Day(Period):
    label = "day"

    def _generate(self):
        return ()

    def to_string(self, fmt: Optional[str] = None) -> str:
        return self._date.to_string(fmt)

    def get_pretty_string(self) -> str:
        return self._date.to_string(ISO_DATE_FORMAT)

    def get_localized_short_string(self) -> str:
        # e.g. "Mon 15 Jan"
        weekday = translate(f"ShortDay_{self._date.isoweekday()}")
        return f"{weekday} {self._date.day} {_short_month(self._date)}"

    def get_localized_long_string(self) -> str:
        # e.g. "Monday 15 January 2024"
        weekday = translate(f"LongDay_{self._date.isoweekday()}")
        return f"{weekday} {self._date.day} {_long_month(self._date)} {self._date.year}"


class Week(Period):
    label = "week"

    def _generate(self):
        monday = self._date.start_of("week")
        return [Day(monday.add_day(i)) for i in range(7)]

    def get_pretty_string(self) -> str:
        return translate(
            "General_DateRangeFromTo",
            self.get_date_start().to_string(ISO_DATE_FORMAT),
            self.get_date_end().to_string(ISO_DATE_FORMAT),
        )

    def get_localized_short_string(self) -> str:
        # e.g. "15 Jan - 21 Jan 2024"
        start, end = self.get_date_start(), self.get_date_end()
        return f"{start.day} {_short_month(start)} - {end.day} {_short_month(end)} {end.year}"

    def get_localized_long_string(self) -> str:
        start, end = self.get_date_start(), self.get_date_end()
        return (
            f"{translate('General_Week')} {start.day} {_long_month(start)} - "
            f"{end.day} {_long_month(end)} {end.year}"
        )


class Month(Period):
    label = "month"

    def _generate(self):
        return _days_between(self._date.start_of("month"), self._date.end_of("month"))

    def get_pretty_string(self) -> str:
        return self._date.to_string("%Y-%m")

    def get_localized_short_string(self) -> str:
        return _short_month(self._date)

    def get_localized_long_string(self) -> str:
        return f"{_long_month(self._date)} {self._date.year}"


class Year(Period):
    label = "year"

    def _generate(self):
        january = self._date.start_of("year")
        return [Month(january.add_period(i, "month")) for i in range(12)]

    def get_pretty_string(self) -> str:
        return str(self._date.year)

    def get_localized_short_string(self) -> str:
        return str(self._date.year)

    def get_localized_long_string(self) -> str:
        return str(self._date.year)


class Range(Period):
    """Arbitrary span of days.

    Built from the period kind and date expression a caller asked for:

      - "2024-01-01,2024-01-31": literal span; the end may also be
        today/now/yesterday. For week/month/year kinds the span widens to
        whole periods.
      - "lastN": the N periods of `kind` ending with the one containing
        `today`. "previousN": the N periods before that one.
        Kind "range" and "day" count days.

    Sub-periods are always Day periods. The anchor date is the first day.
    """

    label = "range"

    def __init__(
        self,
        kind: str,
        date_spec: str,
        timezone: Optional[str] = None,
        today: Optional[Date] = None,
    ):
        if kind not in PERIOD_KINDS and kind != "range":
            raise InvalidPeriodKind(kind, AVAILABLE_PERIODS)

        self._base_kind = kind
        self._date_spec = date_spec
        self._timezone = timezone
        self._today = Date.factory("today" if today is None else today, timezone)

        self._start, self._end = self._compute_bounds()
        if self._start > self._end:
            logger.warning(
                f"Range '{date_spec}' ends before it starts "
                f"({self._start.to_string(ISO_DATE_FORMAT)} > {self._end.to_string(ISO_DATE_FORMAT)}), "
                f"treating as empty"
            )
        super().__init__(self._start)

    @property
    def unit(self) -> str:
        """Calendar unit a lastN count or literal span is measured in."""
        return "day" if self._base_kind == "range" else self._base_kind

    def get_base_kind(self) -> str:
        return self._base_kind

    def _compute_bounds(self) -> tuple[Date, Date]:
        unit = self.unit

        last_n = match_last_n(self._date_spec)
        if last_n is not None:
            keyword, count = last_n
            count = max(count, 1)
            max_last_n = get_setting("max_last_n", 1000)
            if count > max_last_n:
                logger.warning(f"{keyword}{count} exceeds max_last_n, using {keyword}{max_last_n}")
                count = max_last_n

            reference = self._today
            if keyword == "previous":
                reference = reference.add_period(-1, unit)
            start = reference.add_period(-(count - 1), unit).start_of(unit)
            return start, reference.end_of(unit)

        parsed = parse_date_range(self._date_spec, self._timezone, self._today)
        if parsed is None:
            raise InvalidDate(
                self._date_spec,
                translate("General_ExceptionInvalidDateRange", self._date_spec, "YYYY-MM-DD,YYYY-MM-DD"),
            )
        start, end = parsed
        return start.start_of(unit), end.end_of(unit)

    def _generate(self):
        if self._start > self._end:
            return []
        return _days_between(self._start, self._end)

    def get_pretty_string(self) -> str:
        return translate(
            "General_DateRangeFromTo",
            self._start.to_string(ISO_DATE_FORMAT),
            self._end.to_string(ISO_DATE_FORMAT),
        )

    def get_localized_short_string(self) -> str:
        return f"{self._start.to_string(ISO_DATE_FORMAT)},{self._end.to_string(ISO_DATE_FORMAT)}"

    def get_localized_long_string(self) -> str:
        return self.get_pretty_string()

    def __repr__(self):
        return f"Range({self._base_kind!r}, {self._date_spec!r})"


PERIOD_CLASSES = {
    "day": Day,
    "week": Week,
    "month": Month,
    "year": Year,
}


__all__ = [
    "ISO_DATE_FORMAT",
    "PERIOD_KINDS",
    "AVAILABLE_PERIODS",
    "PERIOD_CLASSES",
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "Range",
]
