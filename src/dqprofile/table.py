"""
Table loading and validation helpers.

read_table() loads a file into a DataFrame (only empty CSV fields become
null, tokens such as "NA" stay text), apply_row_limit() trims it to the
configured number of rows and validate_table() / resolve_columns() check the
column names once, before any profiling happens.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from .errors import ConfigError, InvalidColumnReference

logger = logging.getLogger(__name__)

ALL_ROWS = -1


def read_table(path: Union[str, Path]) -> pd.DataFrame:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix in (".csv", ".txt"):
        df = pd.read_csv(p, keep_default_na=False, na_values=[""])
    elif suffix == ".tsv":
        df = pd.read_csv(p, sep="\t", keep_default_na=False, na_values=[""])
    elif suffix == ".json":
        df = pd.read_json(p)
    elif suffix in (".jsonl", ".ndjson"):
        df = pd.read_json(p, lines=True)
    else:
        raise ConfigError(f"Unsupported input format '{suffix or p.name}'")
    logger.info("Loaded %d rows x %d columns from %s", len(df), df.shape[1], p)
    return df


def apply_row_limit(df: pd.DataFrame, limit: int = ALL_ROWS) -> pd.DataFrame:
    """-1 keeps every row, N >= 0 keeps the first N rows."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ConfigError(f"Row limit must be an integer, got {limit!r}")
    if limit == ALL_ROWS:
        return df
    if limit < 0:
        raise ConfigError(f"Row limit must be -1 or >= 0, got {limit}")
    return df.head(limit)


def validate_table(df: pd.DataFrame) -> pd.DataFrame:
    columns = [str(c) for c in df.columns]
    seen = set()
    for c in columns:
        if c in seen:
            raise InvalidColumnReference(c)
        seen.add(c)
    if list(df.columns) != columns:
        df = df.rename(columns=str)
    return df


def resolve_columns(df: pd.DataFrame, column_names: Optional[Iterable[str]] = None) -> List[str]:
    """Requested columns in the table's declared order; every column when None."""
    declared = list(df.columns)
    if column_names is None:
        return declared
    wanted = list(column_names)
    for c in wanted:
        if c not in declared:
            raise InvalidColumnReference(c, declared)
    wanted_set = set(wanted)
    return [c for c in declared if c in wanted_set]
