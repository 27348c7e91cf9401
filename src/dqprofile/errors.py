"""Exceptions raised by dqprofile."""


class ProfilerError(Exception):
    pass


class InvalidColumnReference(ProfilerError, KeyError):
    """A requested column is not part of the table (or the table's column names are not unique)."""

    def __init__(self, column, available=None):
        self.column = column
        self.available = list(available) if available is not None else []
        super().__init__(column)

    def __str__(self):
        if self.available:
            return f"Column '{self.column}' not found. Existing columns: {self.available}"
        return f"Invalid column reference '{self.column}'"


class MalformedCellText(ProfilerError, ValueError):
    """A cell value has no canonical text form."""

    def __init__(self, value, reason: str = ""):
        self.value = value
        msg = f"Cannot render {type(value).__name__} value {value!r} as text"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ConfigError(ProfilerError, ValueError):
    pass
