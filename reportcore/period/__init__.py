"""Period module for report date handling.

This module turns the period/date pairs of a report request into Period
objects that know their boundaries and their chronological sub-periods.

Public API:
    period_factory(kind, date) -> Period
        Single day, week, month or year around a Date

    advanced_period_factory(kind, date_spec, timezone=None, today=None) -> Period
        Also handles "range", "lastN", "previousN" and "YYYY-MM-DD,YYYY-MM-DD"

    make_period_from_query_params(timezone, kind, date) -> Period
        Request-parameter convenience wrapper (empty timezone = UTC)

    is_multiple_period(date_spec, kind) -> bool
        True if date_spec describes several periods

Examples:
    >>> from reportcore.period import advanced_period_factory
    >>>
    >>> year = advanced_period_factory("year", "2024-06-15")
    >>> year.get_number_of_subperiods()
    12
    >>> year.get_range_string()
    '2024-01-01,2024-12-31'
    >>>
    >>> # Literal range, decomposed into days
    >>> rng = advanced_period_factory("range", "2024-02-27,2024-03-02")
    >>> rng.to_string_parts()
    ['2024-02-27', '2024-02-28', '2024-02-29', '2024-03-01', '2024-03-02']
"""

from reportcore.period.perioddate import Date
from reportcore.period.periodidentity import (
    Period,
    Day,
    Week,
    Month,
    Year,
    Range,
)
from reportcore.period.periodnormalize import parse_date_range
from reportcore.period.periodapi import (
    period_factory,
    advanced_period_factory,
    make_period_from_query_params,
    is_multiple_period,
)

__all__ = [
    "Date",
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "Range",
    "parse_date_range",
    "period_factory",
    "advanced_period_factory",
    "make_period_from_query_params",
    "is_multiple_period",
]
