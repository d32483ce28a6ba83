"""Period Expression Parsing
-------------------------

Recognizes the date expressions that describe several periods at once.

Examples:
  >>> match_last_n("last7")
  ('last', 7)

  >>> match_date_range("2024-01-01,2024-01-31")
  ('2024-01-01', '2024-01-31')

  >>> match_date_range("2024-01-01,today")
  ('2024-01-01', 'today')
"""

from __future__ import annotations
import re
from typing import Optional

from reportcore.config import get_setting
from reportcore.period.perioddate import Date

# "last" / "previous" followed by an optional count, nothing else (case-sensitive)
LAST_N_PATTERN = re.compile(r"(last|previous)([0-9]*)")

DATE_LITERAL = r"\d{4}-\d{1,2}-\d{1,2}"

RANGE_END_KEYWORDS = ("today", "now", "yesterday")


def match_last_n(date_spec) -> Optional[tuple[str, int]]:
    """
    Match a lastN / previousN shorthand.

    Args:
        date_spec: Date expression (non-strings never match)

    Returns:
        (keyword, count) tuple, count is 0 when no digits follow,
        or None if the expression is not a shorthand

    Examples:
        >>> match_last_n("previous30")
        ('previous', 30)

        >>> match_last_n("last")
        ('last', 0)

        >>> match_last_n("lastweek")
        None

        >>> match_last_n("Last7")
        None
    """
    if not isinstance(date_spec, str):
        return None
    match = LAST_N_PATTERN.fullmatch(date_spec)
    if not match:
        return None
    return match.group(1), int(match.group(2) or 0)


def _range_pattern(delimiter: str) -> re.Pattern:
    ends = "|".join(RANGE_END_KEYWORDS)
    return re.compile(rf"({DATE_LITERAL}){re.escape(delimiter)}({DATE_LITERAL}|{ends})")


def match_date_range(expr, delimiter: Optional[str] = None) -> Optional[tuple[str, str]]:
    """
    Match a literal date range "<start><delimiter><end>".

    The start is a Y-m-d literal; the end is a Y-m-d literal or one of
    today/now/yesterday. No dates are validated here.

    Args:
        expr: Date expression
        delimiter: Separator (default: configured range_delimiter)

    Returns:
        (start, end) strings, or None if expr is not a range expression

    Examples:
        >>> match_date_range("2024-01-01,2024-02-15")
        ('2024-01-01', '2024-02-15')

        >>> match_date_range("2024-01-01")
        None
    """
    if not isinstance(expr, str):
        return None
    pattern = _range_pattern(delimiter or get_setting("range_delimiter", ","))
    match = pattern.fullmatch(expr)
    if not match:
        return None
    return match.group(1), match.group(2)


def parse_date_range(
    expr,
    timezone: Optional[str] = None,
    today: Optional[Date] = None,
) -> Optional[tuple[Date, Date]]:
    """
    Parse a literal date range into its start and end dates.

    Args:
        expr: Range expression, e.g. "2024-01-01,2024-01-31"
        timezone: Timezone for the parsed dates (default: config)
        today: Reference date for today/now/yesterday ends
            (default: today in timezone)

    Returns:
        (start, end) Date tuple, or None if expr is not a range expression.
        start may be after end; callers decide what that means.

    Raises:
        InvalidDate: If the expression has range syntax but a literal is
            not a real calendar date (e.g. "2024-02-30,2024-03-01")

    Examples:
        >>> start, end = parse_date_range("2024-01-01,2024-01-31")
        >>> end.to_string()
        '2024-01-31'
    """
    matched = match_date_range(expr)
    if matched is None:
        return None

    start_str, end_str = matched
    start = Date.factory(start_str, timezone)

    if end_str in RANGE_END_KEYWORDS:
        if today is None:
            today = Date.factory("today", timezone)
        end = today.start_of("day")
        if end_str == "yesterday":
            end = end.sub_day(1)
    else:
        end = Date.factory(end_str, timezone)

    return start, end


def is_multiple_period_expression(date_spec) -> bool:
    """True if date_spec is a lastN/previousN shorthand or a literal range."""
    return match_last_n(date_spec) is not None or match_date_range(date_spec) is not None


__all__ = [
    "LAST_N_PATTERN",
    "RANGE_END_KEYWORDS",
    "match_last_n",
    "match_date_range",
    "parse_date_range",
    "is_multiple_period_expression",
]
