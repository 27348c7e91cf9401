"""dqprofile: column completeness, sample values and date-range report for tabular data."""
from .classifier import is_empty_value, is_error_marker
from .config import ProfilerConfig
from .date_range import DateRange, analyze_date_range
from .errors import ConfigError, InvalidColumnReference, MalformedCellText, ProfilerError
from .profiler import ColumnStats, profile_column
from .report import REPORT_COLUMNS, assemble_report, format_report, profile_table

__version__ = "1.0.0"

__all__ = [
    "ColumnStats",
    "ConfigError",
    "DateRange",
    "InvalidColumnReference",
    "MalformedCellText",
    "ProfilerConfig",
    "ProfilerError",
    "REPORT_COLUMNS",
    "analyze_date_range",
    "assemble_report",
    "format_report",
    "is_empty_value",
    "is_error_marker",
    "profile_column",
    "profile_table",
]
