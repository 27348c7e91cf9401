"""
Date-range bounds over one designated column.

Bounds are the lexicographic min / max of the canonical text forms of the
non-null values, not parsed dates: values must render to text that sorts
chronologically (ISO 8601 does). A missing or unset column is not an error
and yields (None, None).
"""
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .cells import is_null, to_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    min_date: Optional[str] = None
    max_date: Optional[str] = None


def analyze_date_range(df: pd.DataFrame, date_column: Optional[str]) -> DateRange:
    if not date_column or date_column not in df.columns:
        logger.debug("Date column %r not present, skipping date range", date_column)
        return DateRange()
    texts = [to_text(v) for v in df[date_column] if not is_null(v)]
    if not texts:
        return DateRange()
    return DateRange(min_date=min(texts), max_date=max(texts))
