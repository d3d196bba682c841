"""
Exceptions shared by the analytics services.
"""


class AnalyticsError(Exception):
    """Base class for analytics pipeline failures."""


class InvalidParameterError(AnalyticsError, ValueError):
    """A view parameter is missing, malformed, or out of range.

    Raised before any data access happens.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid parameter '{parameter}': {reason}")


class DataAccessError(AnalyticsError):
    """The dataset accessor could not return rows."""

    def __init__(self, table: str, cause: Exception | None = None):
        self.table = table
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to read '{table}'{detail}")
