"""Public API for the table registry.

Two ways to reach a TableManager:

1. get_table_manager(): the process-wide registry, created on first use
2. report_context(): a registry scoped to one unit of report work, which
   is rolled back when the block exits
"""

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from reportcore.tables.tablemanager import TableManager

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_table_manager() -> TableManager:
    """
    Return the process-wide TableManager, creating it on first call.

    Examples:
        >>> get_table_manager() is get_table_manager()
        True
    """
    logger.debug("Created process-wide table registry")
    return TableManager()


def reset_table_manager():
    """Drop the process-wide TableManager; the next call builds a new one."""
    get_table_manager.cache_clear()
    logger.info("Cleared process-wide table registry")


@contextmanager
def report_context(manager: Optional[TableManager] = None) -> Iterator[TableManager]:
    """
    Scope a TableManager to one report computation.

    On entry the most recent handle is recorded as a checkpoint; on exit
    (normal or not) every table registered inside the block is deleted.
    A checkpoint of 0 means a full reset, so handles start at 1 again.

    Args:
        manager: Registry to use (default: a fresh TableManager)

    Examples:
        >>> with report_context() as tables:
        ...     handle = tables.add_table(df)
        ...     report = build_report(tables.get_table(handle))
        >>> # tables registered inside the block are gone here
    """
    if manager is None:
        manager = TableManager()
    checkpoint = manager.get_most_recent_table_id()
    try:
        yield manager
    finally:
        manager.delete_all(checkpoint)


__all__ = [
    "get_table_manager",
    "reset_table_manager",
    "report_context",
]
