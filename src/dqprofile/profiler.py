"""
Column profiler for dqprofile.

For a single column computes:
- empty / non-empty / total counts (see classifier.is_empty_value)
- completeness as a 0..1 ratio (0.0 for an empty table)
- up to max_samples sample values, in row order, joined with ", "
"""
import logging
from dataclasses import dataclass
from typing import Any, List

import pandas as pd

from .cells import to_text
from .classifier import is_empty_value, is_sample_eligible

logger = logging.getLogger(__name__)

SAMPLE_SEPARATOR = ", "


@dataclass(frozen=True)
class ColumnStats:
    column_name: str
    empty_count: int
    non_empty_count: int
    total_count: int
    completeness: float
    sample_values: str


def _bool_mask(series: pd.Series, fn) -> pd.Series:
    # built from the values so categorical and extension dtypes never leak NA into the mask
    return pd.Series([bool(fn(v)) for v in series], index=series.index, dtype=bool)


def select_samples(series: pd.Series, max_samples: int) -> List[Any]:
    """First max_samples values that are neither empty nor error markers, in row order."""
    if max_samples <= 0 or series.empty:
        return []
    eligible = series[_bool_mask(series, is_sample_eligible)]
    return list(eligible.head(max_samples))


def profile_column(df: pd.DataFrame, column: str, max_samples: int = 5) -> ColumnStats:
    series = df[column]
    total = int(len(series))
    empty = int(_bool_mask(series, is_empty_value).sum()) if total else 0
    non_empty = total - empty
    completeness = float(non_empty) / total if total > 0 else 0.0
    samples = select_samples(series, max_samples)
    sample_text = SAMPLE_SEPARATOR.join(to_text(v) for v in samples)
    logger.debug("Profiled column %r: %d/%d non-empty, %d samples", column, non_empty, total, len(samples))
    return ColumnStats(
        column_name=str(column),
        empty_count=empty,
        non_empty_count=non_empty,
        total_count=total,
        completeness=completeness,
        sample_values=sample_text,
    )

