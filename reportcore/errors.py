"""Exceptions raised by reportcore."""

from reportcore.translate import translate


class InvalidPeriodKind(ValueError):
    """Raised when a period kind is not day, week, month, year (or range)."""

    def __init__(self, kind, available: str = "day, week, month, year, range"):
        self.kind = kind
        super().__init__(translate("General_ExceptionInvalidPeriod", kind, available))


class InvalidDate(ValueError):
    """Raised when a value cannot be used as a Date."""

    def __init__(self, value, message: str = None):
        self.value = value
        super().__init__(message or translate("General_ExceptionInvalidDate", value))


class HandleNotFound(LookupError):
    """Raised when a table handle was never allocated, or has been deleted.

    Usually means the table expired: the report was reprocessed after the
    caller obtained the handle.
    """

    def __init__(self, handle):
        self.handle = handle
        super().__init__(translate("General_ExceptionTableNotFound", handle))


__all__ = [
    "InvalidPeriodKind",
    "InvalidDate",
    "HandleNotFound",
]
