"""Table registry.

Hands out integer handles for the intermediate tables produced while a
report is computed, so large results travel by handle instead of by value.
At the end of the computation the caller reads the registered tables back
and releases them.

Handles start at 1, only ever grow, and are never reused until a full
reset. A deleted handle keeps its slot (tombstone) so later lookups fail
cleanly instead of finding a different table.
"""

from __future__ import annotations
import logging
import threading
from typing import Any, Optional

import pandas as pd

from reportcore.errors import HandleNotFound

logger = logging.getLogger(__name__)


class TableManager:
    """Handle table mapping integer ids to in-memory tables.

    Tables are usually pandas DataFrames but any non-None object is
    accepted. All operations are serialized with a re-entrant lock.

    Examples:
        >>> manager = TableManager()
        >>> first = manager.add_table(pd.DataFrame({"visits": [3]}))
        >>> second = manager.add_table(pd.DataFrame({"visits": [5]}))
        >>> (first, second)
        (1, 2)
        >>> manager.delete_table(first)
        >>> manager.get_table(first)
        Traceback (most recent call last):
        ...
        reportcore.errors.HandleNotFound: This report has been reprocessed ...
    """

    def __init__(self):
        # None marks a deleted slot
        self._tables: dict[int, Optional[Any]] = {}
        self._next_table_id = 1
        self._lock = threading.RLock()

    def add_table(self, table: Any) -> int:
        """
        Register a table.

        Args:
            table: Table to store (must not be None)

        Returns:
            Handle of the stored table
        """
        if table is None:
            raise TypeError("Cannot register None as a table")
        with self._lock:
            table_id = self._next_table_id
            self._tables[table_id] = table
            self._next_table_id += 1
        return table_id

    def get_table(self, table_id: int) -> Any:
        """
        Return the table registered under table_id.

        The table must have been registered before; nothing is loaded from
        storage here.

        Raises:
            HandleNotFound: If the handle was never allocated, was deleted, or is 0
        """
        with self._lock:
            table = self._tables.get(table_id)
        if table is None:
            raise HandleNotFound(table_id)
        return table

    def get_most_recent_table_id(self) -> int:
        """Latest allocated handle (0 if nothing was ever registered)."""
        with self._lock:
            return self._next_table_id - 1

    def delete_table(self, table_id: int):
        """
        Delete a table. Subsequent get_table() calls for it fail.

        Unknown or already deleted handles are ignored.
        """
        with self._lock:
            if self._tables.get(table_id) is not None:
                self._tables[table_id] = None

    def delete_all(self, delete_when_id_greater_than: int = 0):
        """
        Delete every table whose handle is greater than the threshold.

        With the default threshold of 0 the registry is fully reset and
        the next registered table gets handle 1 again. A non-zero threshold
        rolls back to a checkpoint taken with get_most_recent_table_id().
        """
        with self._lock:
            doomed = [
                table_id for table_id, table in self._tables.items()
                if table_id > delete_when_id_greater_than and table is not None
            ]
            for table_id in doomed:
                self.delete_table(table_id)
            logger.debug(f"Deleted {len(doomed)} tables above id {delete_when_id_greater_than}")

            if delete_when_id_greater_than == 0:
                self._tables = {}
                self._next_table_id = 1
                logger.info("Reset table registry")

    def __len__(self):
        """Number of live (not deleted) tables."""
        with self._lock:
            return sum(1 for table in self._tables.values() if table is not None)

    def __contains__(self, table_id):
        with self._lock:
            return self._tables.get(table_id) is not None

    def list_tables(self) -> pd.DataFrame:
        """
        Summarize every slot of the registry.

        Returns:
            DataFrame with columns handle, deleted, type, rows, columns
            (rows/columns are filled for DataFrame-like tables)
        """
        records = []
        with self._lock:
            for table_id, table in self._tables.items():
                shape = getattr(table, "shape", None)
                records.append({
                    "handle": table_id,
                    "deleted": table is None,
                    "type": None if table is None else type(table).__name__,
                    "rows": shape[0] if shape is not None else None,
                    "columns": shape[1] if shape is not None and len(shape) > 1 else None,
                })
        return pd.DataFrame(records, columns=["handle", "deleted", "type", "rows", "columns"])

    def dump_all_tables(self) -> str:
        """Render every registered table for debugging (also logged at DEBUG)."""
        lines = ["-- TableManager.dump_all_tables()"]
        with self._lock:
            for table_id, table in self._tables.items():
                if table is None:
                    lines.append(f"Table (index={table_id}) deleted")
                elif isinstance(table, pd.DataFrame):
                    lines.append(f"Table (index={table_id}) {table.shape[0]}x{table.shape[1]}")
                    lines.append(table.to_string())
                else:
                    lines.append(f"Table (index={table_id}) is not a DataFrame: {table!r}")
        lines.append("-- End TableManager.dump_all_tables()")

        dump = "\n".join(lines)
        logger.debug(dump)
        return dump


__all__ = [
    "TableManager",
]
