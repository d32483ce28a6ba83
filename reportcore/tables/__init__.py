"""Table registry for intermediate report results.

Public API:
    TableManager
        Handle table: add_table, get_table, delete_table, delete_all,
        get_most_recent_table_id, list_tables, dump_all_tables

    get_table_manager() -> TableManager
        Process-wide registry, created on first use

    reset_table_manager()
        Drop the process-wide registry

    report_context(manager=None)
        Context manager scoping a registry to one unit of work

Examples:
    >>> import pandas as pd
    >>> from reportcore.tables import get_table_manager
    >>>
    >>> tables = get_table_manager()
    >>> handle = tables.add_table(pd.DataFrame({"label": ["home"], "visits": [12]}))
    >>> tables.get_table(handle)["visits"].sum()
    12
    >>> tables.delete_all()  # full reset, next handle is 1 again
"""

from reportcore.tables.tablemanager import TableManager
from reportcore.tables.tableapi import (
    get_table_manager,
    reset_table_manager,
    report_context,
)

__all__ = [
    "TableManager",
    "get_table_manager",
    "reset_table_manager",
    "report_context",
]
