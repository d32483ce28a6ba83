"""Report Core - Periods and Table Registry

Building blocks used while computing web-analytics reports.

Usage:
    from reportcore import advanced_period_factory, make_period_from_query_params
    from reportcore import get_table_manager, report_context

    # Period from request parameters
    period = make_period_from_query_params("Europe/Paris", "week", "yesterday")
    period.get_range_string()        # Returns: '2024-01-15,2024-01-21'

    # Sub-periods are computed on first access
    [day.get_pretty_string() for day in period.get_subperiods()]

    # Multiple periods: last 7 days up to today
    last_week = advanced_period_factory("day", "last7")

    # Pass intermediate tables around by handle
    handle = get_table_manager().add_table(df)
    df = get_table_manager().get_table(handle)
"""

__version__ = "0.0.1"

# ============================================================================
# Period API
# ============================================================================

from .period.perioddate import Date
from .period.periodidentity import (
    Period,                  # Base class of all periods
    Day,
    Week,
    Month,
    Year,
    Range,
)
from .period.periodapi import (
    period_factory,                 # Day/week/month/year around a Date
    advanced_period_factory,        # Also range, lastN, previousN
    make_period_from_query_params,  # Request parameter convenience
    is_multiple_period,             # Does a date spec cover several periods?
)
from .period.periodnormalize import (
    parse_date_range,        # "YYYY-MM-DD,YYYY-MM-DD" -> (start, end)
)

# ============================================================================
# Table Registry API
# ============================================================================

from .tables.tablemanager import TableManager
from .tables.tableapi import (
    get_table_manager,       # Process-wide registry
    reset_table_manager,     # Drop the process-wide registry
    report_context,          # Registry scoped to one unit of work
)

# ============================================================================
# Errors and Configuration
# ============================================================================

from .errors import (
    InvalidPeriodKind,
    InvalidDate,
    HandleNotFound,
)
from .config import (
    load_config,
    clear_config_cache,
)

__all__ = [
    # Version
    "__version__",

    # Periods
    "Date",
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "Range",
    "period_factory",
    "advanced_period_factory",
    "make_period_from_query_params",
    "is_multiple_period",
    "parse_date_range",

    # Table registry
    "TableManager",
    "get_table_manager",
    "reset_table_manager",
    "report_context",

    # Errors
    "InvalidPeriodKind",
    "InvalidDate",
    "HandleNotFound",

    # Configuration
    "load_config",
    "clear_config_cache",
]
