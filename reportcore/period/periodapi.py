"""Period construction API.

Public entry points for building Period objects from the period/date
pairs that report requests carry.
"""

from __future__ import annotations
from typing import Optional, Union

from reportcore.errors import InvalidPeriodKind
from reportcore.period.perioddate import Date, DateLike
from reportcore.period.periodidentity import (
    AVAILABLE_PERIODS,
    PERIOD_CLASSES,
    Period,
    Range,
)
from reportcore.period.periodnormalize import is_multiple_period_expression


def period_factory(kind: str, date: Date) -> Period:
    """
    Create a single Day, Week, Month or Year period.

    Args:
        kind: "day", "week", "month" or "year"
        date: Date anchoring the period (any day inside it)

    Returns:
        Period instance

    Raises:
        InvalidPeriodKind: If kind is not one of the four period kinds
        InvalidDate: If date is not a Date

    Examples:
        >>> period_factory("month", Date.factory("2024-02-10")).get_range_string()
        '2024-02-01,2024-02-29'
    """
    try:
        period_class = PERIOD_CLASSES[kind]
    except (KeyError, TypeError):
        raise InvalidPeriodKind(kind, AVAILABLE_PERIODS) from None
    return period_class(date)


def is_multiple_period(date_spec, kind: str) -> bool:
    """
    Indicate if date_spec and kind describe several periods.

    True when date_spec is a "lastN"/"previousN" shorthand or a literal
    "YYYY-MM-DD,YYYY-MM-DD" range, unless kind is already "range".

    Examples:
        >>> is_multiple_period("last7", "day")
        True

        >>> is_multiple_period("last7", "range")
        False

        >>> is_multiple_period("lastweek", "day")
        False
    """
    return is_multiple_period_expression(date_spec) and kind != "range"


def advanced_period_factory(
    kind: str,
    date_spec: Union[str, Date],
    timezone: Optional[str] = None,
    today: Optional[DateLike] = None,
) -> Period:
    """
    Create a period from anything an API request can pass as period and date.

    Multiple-period expressions and kind "range" produce a Range; everything
    else is parsed as a single date and handed to period_factory().

    Args:
        kind: "day", "week", "month", "year" or "range"
        date_spec: Date string, keyword, lastN/previousN or literal range
        timezone: Timezone for parsing and relative keywords (default: config)
        today: Reference date for lastN/previousN (default: today in timezone)

    Returns:
        Period instance

    Examples:
        >>> advanced_period_factory("day", "last7", today="2024-01-10").get_range_string()
        '2024-01-04,2024-01-10'

        >>> advanced_period_factory("week", "2024-01-17").get_range_string()
        '2024-01-15,2024-01-21'
    """
    if is_multiple_period(date_spec, kind) or kind == "range":
        return Range(kind, date_spec, timezone, today)
    return period_factory(kind, Date.factory(date_spec, timezone))


def make_period_from_query_params(
    timezone: Optional[str],
    kind: str,
    date: Union[str, Date],
) -> Period:
    """
    Create a period from request parameters (site timezone, period, date).

    Args:
        timezone: Site timezone; empty means UTC
        kind: "day", "week", "month", "year" or "range"
        date: Date, date string, keyword or range expression

    Returns:
        Period instance. For kind "range" the range's today/now/yesterday
        and lastN are resolved against today in timezone.

    Examples:
        >>> make_period_from_query_params("", "range", "2024-01-01,2024-01-03").get_number_of_subperiods()
        3
    """
    if not timezone:
        timezone = "UTC"

    if kind == "range":
        return Range("range", date, timezone, Date.factory("today", timezone))

    if not isinstance(date, Date):
        # Keywords pick the calendar day in the site timezone; the period
        # itself is anchored in the default timezone like any literal date
        if date in ("now", "today"):
            date = Date.factory("today", timezone).date()
        elif date in ("yesterday", "yesterdaySameTime"):
            date = Date.factory("today", timezone).sub_day(1).date()
        date = Date.factory(date)
    return period_factory(kind, date)


__all__ = [
    "period_factory",
    "is_multiple_period",
    "advanced_period_factory",
    "make_period_from_query_params",
]
