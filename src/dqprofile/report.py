"""
Report assembly for dqprofile.

assemble_report() profiles every requested column, appends the two date-range
sentinel rows and returns a DataFrame with the columns:

  Index, ColumnName, EmptyBlankZeroNullCount, NonEmptyCount, TotalCount,
  CompletenessPercentage, SampleValues, TableName, AnalysisDate

CompletenessPercentage holds a 0..1 ratio; format_report() renders it as a
percentage for display.
"""
import datetime as dt
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import pandas as pd

from .config import ProfilerConfig
from .date_range import analyze_date_range
from .profiler import ColumnStats, profile_column
from .table import apply_row_limit, resolve_columns, validate_table

logger = logging.getLogger(__name__)

TimestampProvider = Callable[[], dt.datetime]

DATA_RANGE_MIN = "DATA_RANGE_MIN"
DATA_RANGE_MAX = "DATA_RANGE_MAX"

REPORT_COLUMNS = [
    "Index",
    "ColumnName",
    "EmptyBlankZeroNullCount",
    "NonEmptyCount",
    "TotalCount",
    "CompletenessPercentage",
    "SampleValues",
    "TableName",
    "AnalysisDate",
]
_COUNT_COLUMNS = ["EmptyBlankZeroNullCount", "NonEmptyCount", "TotalCount"]


def _stats_row(stats: ColumnStats, table_name: str, analysis_date: dt.datetime) -> Dict[str, Any]:
    return {
        "ColumnName": stats.column_name,
        "EmptyBlankZeroNullCount": stats.empty_count,
        "NonEmptyCount": stats.non_empty_count,
        "TotalCount": stats.total_count,
        "CompletenessPercentage": stats.completeness,
        "SampleValues": stats.sample_values,
        "TableName": table_name,
        "AnalysisDate": analysis_date,
    }


def _sentinel_row(label: str, value: Optional[str], table_name: str, analysis_date: dt.datetime) -> Dict[str, Any]:
    return {
        "ColumnName": label,
        "EmptyBlankZeroNullCount": None,
        "NonEmptyCount": None,
        "TotalCount": None,
        "CompletenessPercentage": None,
        "SampleValues": value,
        "TableName": table_name,
        "AnalysisDate": analysis_date,
    }


def assemble_report(
    df: pd.DataFrame,
    column_names: Optional[Iterable[str]] = None,
    date_column: Optional[str] = None,
    max_samples: int = 5,
    table_name: str = "",
    timestamp_provider: Optional[TimestampProvider] = None,
) -> pd.DataFrame:
    now = timestamp_provider or dt.datetime.now
    columns = resolve_columns(df, column_names)

    rows: List[Dict[str, Any]] = []
    for c in columns:
        stats = profile_column(df, c, max_samples)
        rows.append(_stats_row(stats, table_name, now()))

    date_range = analyze_date_range(df, date_column)
    rows.append(_sentinel_row(DATA_RANGE_MIN, date_range.min_date, table_name, now()))
    rows.append(_sentinel_row(DATA_RANGE_MAX, date_range.max_date, table_name, now()))

    report = pd.DataFrame.from_records(rows, columns=REPORT_COLUMNS[1:])
    for c in _COUNT_COLUMNS:
        report[c] = report[c].astype("Int64")
    report["CompletenessPercentage"] = report["CompletenessPercentage"].astype("Float64")
    report["SampleValues"] = report["SampleValues"].astype(object)
    report.insert(0, "Index", pd.Series(range(1, len(report) + 1), index=report.index, dtype="int64"))

    logger.info(
        "Profiled %d columns of '%s' (%d rows), date range %s .. %s",
        len(columns), table_name, len(df), date_range.min_date, date_range.max_date,
    )
    return report[REPORT_COLUMNS]


def profile_table(
    df: pd.DataFrame,
    config: Optional[ProfilerConfig] = None,
    column_names: Optional[Iterable[str]] = None,
    timestamp_provider: Optional[TimestampProvider] = None,
) -> pd.DataFrame:
    """Validate, apply the row limit and assemble the report for a whole table."""
    cfg = (config or ProfilerConfig()).validate()
    table = apply_row_limit(validate_table(df), cfg.row_limit)
    return assemble_report(
        table,
        column_names=column_names,
        date_column=cfg.date_column_name,
        max_samples=cfg.max_sample_values,
        table_name=cfg.table_label,
        timestamp_provider=timestamp_provider,
    )


def format_report(report: pd.DataFrame, decimals: int = 2) -> pd.DataFrame:
    """Display copy: completeness as "33.33%", nulls as empty strings."""
    out = report.copy()
    out["CompletenessPercentage"] = [
        "" if pd.isna(v) else f"{float(v) * 100:.{decimals}f}%" for v in report["CompletenessPercentage"]
    ]
    out = out.astype(object).where(out.notna(), "")
    return out
